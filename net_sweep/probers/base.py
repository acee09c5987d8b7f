"""
Интерфейс проверки доступности одной цели
"""

from abc import ABC, abstractmethod


class Prober(ABC):
    """Проверка доступности цели"""

    @abstractmethod
    async def is_reachable(self, target: str) -> bool:
        """
        Проверить одну цель

        Returns:
            True если цель ответила, False если нет

        Raises:
            ProbeExecutionError: Проверку не удалось выполнить или интерпретировать
        """
        raise NotImplementedError
