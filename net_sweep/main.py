"""
Точка входа сканера доступности хостов
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config import ConfigLoader, SweepConfig
from .errors import SweepError
from .probers import Prober, SystemPingProber
from .sweeper import sweep_targets
from .targets import enumerate_targets
from .utils import setup_logging, check_ping_available, print_summary

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='net-sweep',
        description='Параллельная проверка доступности хостов через ping',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  net-sweep 192.168.1.1 192.168.1.254
  net-sweep --file hosts.txt --count 2 --timeout 3
  cat hosts.txt | net-sweep --pipe --concurrency 50
        """
    )

    parser.add_argument('start', nargs='?', metavar='FROM', help='Начальный IP-адрес диапазона')
    parser.add_argument('end', nargs='?', metavar='TO', help='Конечный IP-адрес диапазона')

    parser.add_argument(
        '--file', '-f',
        help='Файл со списком адресов или имен хостов, по одному на строку'
    )

    parser.add_argument(
        '--pipe', '-p',
        action='store_true',
        help='Читать адреса из стандартного ввода'
    )

    parser.add_argument(
        '--count', '-c',
        type=int,
        help='Количество пакетов ping на хост (по умолчанию: 1)'
    )

    parser.add_argument(
        '--timeout', '-t',
        type=float,
        help='Таймаут проверки одного хоста в секундах'
    )

    parser.add_argument(
        '--concurrency', '-j',
        type=int,
        help='Максимум одновременных проверок, 0 - без ограничения (по умолчанию: 256)'
    )

    parser.add_argument('--config', help='Файл конфигурации YAML')
    parser.add_argument('--log-file', help='Дополнительно писать лог в файл')

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Подробный вывод (DEBUG уровень) и итоги в stderr'
    )

    return parser


def load_config(args: argparse.Namespace) -> SweepConfig:
    """Конфигурация из файла с учетом аргументов командной строки"""
    config = ConfigLoader.load(args.config)

    overrides = {}
    if args.count is not None:
        overrides['ping_count'] = args.count
    if args.timeout is not None:
        overrides['timeout'] = args.timeout
    if args.concurrency is not None:
        overrides['concurrent_limit'] = args.concurrency
    if args.log_file:
        overrides['log_file'] = args.log_file
    if args.verbose:
        overrides['log_level'] = 'DEBUG'

    return replace(config, **overrides) if overrides else config


def print_reachable(target: str):
    print(target, flush=True)


def main(argv: Optional[List[str]] = None, prober: Optional[Prober] = None) -> int:
    """
    Основная функция

    Returns:
        Код возврата процесса
    """
    args = build_argparser().parse_args(argv)

    try:
        return _run_sweep(args, prober)
    except KeyboardInterrupt:
        print("\nСканирование прервано пользователем", file=sys.stderr)
        return 130


def _run_sweep(args: argparse.Namespace, prober: Optional[Prober]) -> int:
    try:
        config = load_config(args)
        setup_logging(config.log_level, config.log_file)

        targets = enumerate_targets(
            start=args.start,
            end=args.end,
            file=args.file,
            pipe=args.pipe,
        )
    except (SweepError, ValueError, OSError) as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1

    if prober is None:
        if not check_ping_available(config.ping_binary):
            logger.warning(f"Команда '{config.ping_binary}' не найдена в PATH")
        prober = SystemPingProber(config)

    result = sweep_targets(targets, prober, config, on_reachable=print_reachable)

    if args.verbose:
        print_summary(result)

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
