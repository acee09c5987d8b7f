"""
Способы проверки доступности целей
"""

from .base import Prober
from .system import SystemPingProber
from .fake import ScriptedProber

__all__ = ['Prober', 'SystemPingProber', 'ScriptedProber']
