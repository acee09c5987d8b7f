"""
Детерминированная проверка без запуска процессов
"""

import asyncio
from typing import Dict, List, Optional, Union

from .base import Prober

ScriptedResult = Union[bool, BaseException]


class ScriptedProber(Prober):
    """
    results: dict[target] -> True, False или исключение, которое нужно бросить.
    Цели, которых нет в results, считаются недоступными.
    """

    def __init__(self, results: Optional[Dict[str, ScriptedResult]] = None, delay: float = 0.0):
        self.results = dict(results or {})
        self.delay = delay
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def is_reachable(self, target: str) -> bool:
        self.calls.append(target)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Уступаем цикл событий, чтобы задачи шли вперемешку
            await asyncio.sleep(self.delay)
            result = self.results.get(target, False)
            if isinstance(result, BaseException):
                raise result
            return bool(result)
        finally:
            self.in_flight -= 1
