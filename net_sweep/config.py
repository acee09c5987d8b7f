"""
Модуль конфигурации и моделей данных
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional, List

import yaml

logger = logging.getLogger(__name__)


class ProbeStatus(Enum):
    """Результат проверки одной цели"""
    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"
    FAILED = "failed"


@dataclass(frozen=True)
class ProbeOutcome:
    """Итог проверки одной цели"""
    target: str
    status: ProbeStatus
    reason: Optional[str] = None

    @classmethod
    def reachable(cls, target: str) -> "ProbeOutcome":
        return cls(target, ProbeStatus.REACHABLE)

    @classmethod
    def unreachable(cls, target: str) -> "ProbeOutcome":
        return cls(target, ProbeStatus.UNREACHABLE)

    @classmethod
    def failed(cls, target: str, reason: str) -> "ProbeOutcome":
        return cls(target, ProbeStatus.FAILED, reason)

    @property
    def is_reachable(self) -> bool:
        return self.status is ProbeStatus.REACHABLE


@dataclass
class SweepSummary:
    """Сводка по сканированию"""
    total_hosts: int = 0
    reachable_hosts: int = 0
    unreachable_hosts: int = 0
    failed_hosts: int = 0
    scan_duration: float = 0.0

    @property
    def reachable_percent(self) -> float:
        """Процент доступных хостов"""
        if self.total_hosts == 0:
            return 0.0
        return (self.reachable_hosts / self.total_hosts) * 100


@dataclass
class SweepResult:
    """Результат сканирования: по одному итогу на каждую переданную цель"""
    outcomes: List[ProbeOutcome] = field(default_factory=list)
    summary: SweepSummary = field(default_factory=SweepSummary)

    @property
    def reachable(self) -> List[str]:
        """Цели, ответившие на проверку"""
        return [o.target for o in self.outcomes if o.status is ProbeStatus.REACHABLE]

    @property
    def unreachable(self) -> List[str]:
        return [o.target for o in self.outcomes if o.status is ProbeStatus.UNREACHABLE]

    @property
    def failed(self) -> List[ProbeOutcome]:
        return [o for o in self.outcomes if o.status is ProbeStatus.FAILED]


@dataclass
class SweepConfig:
    """Конфигурация сканера с валидацией"""

    # Параметры ping
    ping_binary: str = "ping"
    ping_count: Optional[int] = 1  # None - значение по умолчанию самой утилиты
    timeout: Optional[float] = None

    # Параметры производительности, None или 0 - без ограничения
    concurrent_limit: Optional[int] = 256

    # Настройки вывода
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Валидация значений после инициализации"""
        self._validate_values()

    def _validate_values(self):
        """Проверка корректности значений"""
        # Значения из YAML приходят без приведения типов
        if not isinstance(self.ping_binary, str) or not self.ping_binary:
            raise ValueError("ping_binary должен быть непустой строкой")
        if not self._is_int_or_none(self.ping_count):
            raise ValueError("ping_count должен быть целым числом")
        if self.ping_count is not None and self.ping_count <= 0:
            raise ValueError("ping_count должен быть положительным числом")
        if self.timeout is not None and (isinstance(self.timeout, bool)
                                         or not isinstance(self.timeout, (int, float))):
            raise ValueError("timeout должен быть числом")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout должен быть положительным числом")
        if not self._is_int_or_none(self.concurrent_limit):
            raise ValueError("concurrent_limit должен быть целым числом")
        if self.concurrent_limit is not None and self.concurrent_limit < 0:
            raise ValueError("concurrent_limit не может быть отрицательным")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError("log_file должен быть строкой")

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_log_levels:
            raise ValueError(f"log_level должен быть одним из: {valid_log_levels}")

    @staticmethod
    def _is_int_or_none(value) -> bool:
        return value is None or (isinstance(value, int) and not isinstance(value, bool))

    @property
    def is_bounded(self) -> bool:
        return bool(self.concurrent_limit)


class ConfigLoader:
    """Загрузчик конфигурации из YAML"""

    CONFIG_FILES = [
        "net_sweep.yaml",
        "config/net_sweep.yaml",
    ]

    DEFAULT_CONFIG = {
        "ping": {
            "binary": "ping",
            "count": 1,
            "timeout": None,
        },
        "sweep": {
            "concurrent_limit": 256,
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }

    # Секция и ключ YAML -> поле SweepConfig
    FIELD_MAP = {
        ("ping", "binary"): "ping_binary",
        ("ping", "count"): "ping_count",
        ("ping", "timeout"): "timeout",
        ("sweep", "concurrent_limit"): "concurrent_limit",
        ("logging", "level"): "log_level",
        ("logging", "file"): "log_file",
    }

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> SweepConfig:
        """
        Загрузка конфигурации

        Args:
            config_path: Путь к файлу конфигурации (опционально)

        Returns:
            Объект конфигурации

        Raises:
            ValueError: Файл указан явно, но не найден или не разбирается
        """
        config_dict = cls.DEFAULT_CONFIG

        found_config = cls._find_config_file(config_path)
        if found_config:
            user_config = cls._load_config_file(found_config)
            config_dict = cls._deep_merge(cls.DEFAULT_CONFIG, user_config)
            logger.info(f"Загружена конфигурация из {found_config}")
        else:
            logger.debug("Конфигурационный файл не найден, используются значения по умолчанию")

        return SweepConfig(**cls._flatten(config_dict))

    @classmethod
    def _find_config_file(cls, config_path: Optional[str] = None) -> Optional[Path]:
        """Поиск файла конфигурации"""
        if config_path:
            path = Path(config_path)
            if path.exists():
                return path
            raise ValueError(f"Файл конфигурации не найден: {config_path}")

        for config_file in cls.CONFIG_FILES:
            path = Path(config_file)
            if path.exists():
                return path

        return None

    @staticmethod
    def _load_config_file(filepath: Path) -> Dict[str, Any]:
        """Загрузка конфигурации из файла"""
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ValueError(f"Ошибка загрузки конфигурации {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Конфигурация {filepath} должна быть словарем")
        return data

    @classmethod
    def _deep_merge(cls, base: Dict, update: Dict) -> Dict:
        """Рекурсивное слияние двух словарей"""
        result = base.copy()
        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = cls._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @classmethod
    def _flatten(cls, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Преобразование секций YAML в аргументы SweepConfig"""
        values = {}
        for section, options in config_dict.items():
            if not isinstance(options, dict):
                logger.warning(f"Неизвестный параметр конфигурации: {section}")
                continue
            for key, value in options.items():
                field_name = cls.FIELD_MAP.get((section, key))
                if field_name is None:
                    logger.warning(f"Неизвестный параметр конфигурации: {section}.{key}")
                    continue
                values[field_name] = value
        return values
