"""
Параллельный сканер доступности хостов
"""

__version__ = "1.0.0"

from .config import SweepConfig, ProbeOutcome, ProbeStatus, SweepResult
from .errors import (
    SweepError,
    InvalidInputCombination,
    AddressParseError,
    FileReadError,
    StreamReadError,
    ProbeExecutionError,
)
from .probers import Prober, SystemPingProber, ScriptedProber
from .sweeper import ReachabilitySweeper, sweep_targets
from .targets import enumerate_targets
