"""
Проверка доступности через системную утилиту ping
"""

import asyncio
import logging
import platform
from typing import List, Optional, Set

from ..config import SweepConfig
from ..errors import ProbeExecutionError
from .base import Prober

logger = logging.getLogger(__name__)


def unreachable_exit_codes(system: Optional[str] = None) -> Set[int]:
    """Коды возврата ping, означающие отсутствие ответа"""
    system = (system or platform.system()).lower()
    if system == 'darwin':
        # macOS возвращает 2, если пакеты отправлены, но ответа нет
        return {1, 2}
    return {1}


class SystemPingProber(Prober):
    """
    Запуск ping для каждой цели

    Результат определяется только по коду возврата: 0 - цель доступна,
    код "нет ответа" для текущей ОС - недоступна, любой другой код -
    ProbeExecutionError.
    """

    def __init__(self, config: SweepConfig, system: Optional[str] = None):
        self.config = config
        self.system = (system or platform.system()).lower()
        self.unreachable_codes = unreachable_exit_codes(self.system)

    def build_command(self, target: str) -> List[str]:
        """Построение команды ping"""
        cmd = [self.config.ping_binary]

        if self.config.ping_count is not None:
            count_flag = '-n' if self.system == 'windows' else '-c'
            cmd.extend([count_flag, str(self.config.ping_count)])

        cmd.append(target)
        return cmd

    async def is_reachable(self, target: str) -> bool:
        cmd = self.build_command(target)
        logger.debug(f"Запуск: {' '.join(cmd)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            raise ProbeExecutionError(target, f"не удалось запустить {cmd[0]}: {e}") from e

        try:
            _, stderr = await asyncio.wait_for(process.communicate(), timeout=self.config.timeout)
        except asyncio.TimeoutError:
            await self._kill(process)
            logger.debug(f"{target}: нет ответа за {self.config.timeout} сек")
            return False
        except asyncio.CancelledError:
            await self._kill(process)
            raise

        code = process.returncode
        if code == 0:
            return True
        if code in self.unreachable_codes:
            return False

        message = stderr.decode('utf-8', errors='replace').strip() if stderr else ""
        raise ProbeExecutionError(target, f"{cmd[0]} завершился с кодом {code}"
                                          + (f": {message}" if message else ""))

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process):
        """Остановка зависшего процесса ping"""
        if process.returncode is not None:
            return
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()
