"""
Модуль асинхронного сканера доступности
"""

import asyncio
import logging
import time
from typing import Callable, Iterable, List, Optional

from .config import SweepConfig, ProbeOutcome, ProbeStatus, SweepResult, SweepSummary
from .errors import ProbeExecutionError
from .probers.base import Prober

logger = logging.getLogger(__name__)

ReachableCallback = Callable[[str], None]
FailureCallback = Callable[[ProbeOutcome], None]


def log_failure(outcome: ProbeOutcome):
    """Обработчик ошибок проверки по умолчанию"""
    logger.error(f"Ошибка при сканировании {outcome.target}: {outcome.reason}")


class ReachabilitySweeper:
    """Асинхронный сканер: одна задача на каждую цель"""

    def __init__(self,
                 prober: Prober,
                 config: Optional[SweepConfig] = None,
                 on_reachable: Optional[ReachableCallback] = None,
                 on_failure: Optional[FailureCallback] = None):
        self.prober = prober
        self.config = config or SweepConfig()
        self.on_reachable = on_reachable
        self.on_failure = on_failure or log_failure

    async def _probe_single_host(self, target: str,
                                 semaphore: Optional[asyncio.Semaphore]) -> ProbeOutcome:
        """Проверка одного хоста, ошибки превращаются в итог FAILED"""
        if semaphore is not None:
            async with semaphore:
                outcome = await self._run_probe(target)
        else:
            outcome = await self._run_probe(target)

        if outcome.status is ProbeStatus.REACHABLE:
            if self.on_reachable:
                self._notify(self.on_reachable, target, target)
        elif outcome.status is ProbeStatus.FAILED:
            self._notify(self.on_failure, target, outcome)

        return outcome

    @staticmethod
    def _notify(callback, target: str, value):
        """Ошибка обработчика одной цели не прерывает сканирование"""
        try:
            callback(value)
        except Exception as e:
            logger.error(f"Ошибка обработчика результата для {target}: {type(e).__name__}: {e}")

    async def _run_probe(self, target: str) -> ProbeOutcome:
        try:
            reachable = await self.prober.is_reachable(target)
        except ProbeExecutionError as e:
            return ProbeOutcome.failed(target, e.reason or str(e))
        except Exception as e:
            logger.debug(f"Непредвиденная ошибка при проверке {target}", exc_info=True)
            return ProbeOutcome.failed(target, f"{type(e).__name__}: {e}")

        if reachable:
            return ProbeOutcome.reachable(target)
        return ProbeOutcome.unreachable(target)

    async def sweep(self, targets: Iterable[str]) -> SweepResult:
        """
        Проверка всех целей

        Args:
            targets: Список целей

        Returns:
            Результат с итогом для каждой цели в порядке передачи
        """
        target_list: List[str] = list(targets)
        start_time = time.time()

        semaphore = asyncio.Semaphore(self.config.concurrent_limit) if self.config.is_bounded else None
        limit = self.config.concurrent_limit if self.config.is_bounded else "без ограничения"
        logger.info(f"Начинаем сканирование {len(target_list)} хостов, "
                    f"одновременных проверок: {limit}")

        tasks = [
            asyncio.ensure_future(self._probe_single_host(target, semaphore))
            for target in target_list
        ]
        try:
            outcomes = await asyncio.gather(*tasks)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        result = SweepResult(outcomes=list(outcomes))
        result.summary = self._summarize(result.outcomes, time.time() - start_time)

        logger.info(f"Сканирование завершено за {result.summary.scan_duration:.1f} секунд")
        logger.info(f"Результаты: {result.summary.reachable_hosts} доступно, "
                    f"{result.summary.unreachable_hosts} недоступно, "
                    f"{result.summary.failed_hosts} ошибок")
        return result

    @staticmethod
    def _summarize(outcomes: List[ProbeOutcome], duration: float) -> SweepSummary:
        summary = SweepSummary(total_hosts=len(outcomes), scan_duration=duration)
        for outcome in outcomes:
            if outcome.status is ProbeStatus.REACHABLE:
                summary.reachable_hosts += 1
            elif outcome.status is ProbeStatus.UNREACHABLE:
                summary.unreachable_hosts += 1
            else:
                summary.failed_hosts += 1
        return summary


def sweep_targets(targets: Iterable[str],
                  prober: Prober,
                  config: Optional[SweepConfig] = None,
                  on_reachable: Optional[ReachableCallback] = None,
                  on_failure: Optional[FailureCallback] = None) -> SweepResult:
    """Синхронная обертка над ReachabilitySweeper.sweep"""
    sweeper = ReachabilitySweeper(prober, config, on_reachable=on_reachable, on_failure=on_failure)
    return asyncio.run(sweeper.sweep(targets))
