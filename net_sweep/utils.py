"""
Вспомогательные утилиты
"""

import logging
import shutil
import sys
from typing import Optional

from .config import SweepResult


def setup_logging(log_level: str = "WARNING", log_file: Optional[str] = None):
    """
    Настройка логирования

    Консольный вывод идет в stderr: stdout занят списком доступных хостов.

    Args:
        log_level: Уровень логирования
        log_file: Файл лога (опционально)
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    formatter = logging.Formatter(log_format, date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    # Отключаем логирование asyncio если не в DEBUG режиме
    if level > logging.DEBUG:
        logging.getLogger('asyncio').setLevel(logging.WARNING)


def check_ping_available(binary: str = "ping") -> bool:
    """
    Проверка наличия утилиты ping

    Returns:
        True если утилита найдена в PATH
    """
    return shutil.which(binary) is not None


def print_summary(result: SweepResult, stream=None):
    """Печать итогов сканирования"""
    stream = stream or sys.stderr
    summary = result.summary
    print("=" * 60, file=stream)
    print("ИТОГИ СКАНИРОВАНИЯ:", file=stream)
    print(f"  Проверено хостов: {summary.total_hosts}", file=stream)
    print(f"  Доступно: {summary.reachable_hosts} ({summary.reachable_percent:.1f}%)", file=stream)
    print(f"  Недоступно: {summary.unreachable_hosts}", file=stream)
    print(f"  Ошибок проверки: {summary.failed_hosts}", file=stream)
    for outcome in result.failed:
        print(f"    {outcome.target}: {outcome.reason}", file=stream)
    print(f"  Общее время сканирования: {summary.scan_duration:.1f} сек", file=stream)
    print("=" * 60, file=stream)
