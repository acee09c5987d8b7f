"""
Модуль получения списка целей: диапазон IPv4, файл или стандартный ввод
"""

import ipaddress
import sys
import logging
from typing import List, Optional, TextIO, Iterable

from .errors import (
    InvalidInputCombination,
    AddressParseError,
    FileReadError,
    StreamReadError,
)

logger = logging.getLogger(__name__)


def parse_ipv4(value: str) -> ipaddress.IPv4Address:
    """
    Разбор границы диапазона

    Args:
        value: Строка с адресом

    Returns:
        IPv4-адрес

    Raises:
        AddressParseError: Строка не является IPv4-адресом
    """
    try:
        return ipaddress.IPv4Address(value.strip())
    except ValueError as e:
        raise AddressParseError(value, str(e)) from e


def targets_from_range(start: str, end: str) -> List[str]:
    """
    Все адреса диапазона start..end включительно, по возрастанию

    Если начальный адрес больше конечного, возвращается пустой список.
    """
    start_ip = parse_ipv4(start)
    end_ip = parse_ipv4(end)

    start_int = int(start_ip)
    end_int = int(end_ip)

    if start_int > end_int:
        logger.warning(f"Начальный адрес больше конечного в диапазоне: {start_ip}-{end_ip}")
        return []

    targets = [str(ipaddress.IPv4Address(ip_int)) for ip_int in range(start_int, end_int + 1)]
    logger.info(f"Диапазон {start_ip}-{end_ip}: {len(targets)} адресов")
    return targets


def _clean_lines(lines: Iterable[str]) -> List[str]:
    """Обрезка пробелов и пропуск пустых строк"""
    targets = []
    for line in lines:
        line = line.strip()
        if line:
            targets.append(line)
    return targets


def targets_from_file(filepath: str) -> List[str]:
    """
    Чтение целей из файла, по одной на строку, в порядке файла

    Raises:
        FileReadError: Файл не удалось открыть или прочитать
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(filepath), str(e)) from e

    targets = _clean_lines(content.splitlines())
    logger.info(f"Из файла {filepath} получено {len(targets)} целей")
    return targets


def targets_from_stream(stream: TextIO) -> List[str]:
    """
    Чтение целей из потока построчно до конца ввода

    Ошибка чтения любой строки прерывает работу целиком.

    Raises:
        StreamReadError: Строку не удалось прочитать
    """
    lines = []
    try:
        for line in stream:
            lines.append(line)
    except (OSError, UnicodeDecodeError) as e:
        raise StreamReadError(str(e)) from e

    targets = _clean_lines(lines)
    logger.info(f"Из стандартного ввода получено {len(targets)} целей")
    return targets


def enumerate_targets(start: Optional[str] = None,
                      end: Optional[str] = None,
                      file: Optional[str] = None,
                      pipe: bool = False,
                      stdin: Optional[TextIO] = None) -> List[str]:
    """
    Получение целей из ровно одного источника

    Args:
        start: Начальный адрес диапазона
        end: Конечный адрес диапазона
        file: Путь к файлу с целями
        pipe: Читать цели из стандартного ввода
        stdin: Поток для режима pipe (по умолчанию sys.stdin)

    Returns:
        Список целей

    Raises:
        InvalidInputCombination: Источник не выбран или выбрано несколько
    """
    has_range = start is not None or end is not None
    modes = [has_range, file is not None, bool(pipe)]

    if sum(modes) != 1:
        raise InvalidInputCombination()

    if has_range:
        if start is None or end is None:
            raise InvalidInputCombination("Для диапазона нужны оба адреса: FROM и TO")
        return targets_from_range(start, end)

    if file is not None:
        return targets_from_file(file)

    if stdin is None:
        stdin = sys.stdin
    return targets_from_stream(stdin)
