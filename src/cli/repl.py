"""Консольный драйвер: одно выражение на строку stdin.

Для каждой строки печатается римская запись результата или
"error: <описание>". Ошибка в строке не прерывает обработку остальных,
код возврата всегда 0.

Usage:
    roman-calc
    roman-calc --strict --log-level DEBUG < expressions.txt
    python -m src.cli
"""

import argparse
import logging
import sys
from typing import Sequence, TextIO

import structlog

from src.evaluator import Evaluator, EvaluatorConfig

log = structlog.get_logger()

# Корневой stdlib-логгер пакета: parser и evaluator пишут в его потомков
PACKAGE_LOGGER = "src"


def configure_logging(level: str = "WARNING") -> None:
    """structlog и stdlib logging в stderr, чтобы stdout содержал только результаты.

    Логгеры parser и evaluator пишут через stdlib logging и без этой
    настройки молчат.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level.upper())
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def run(
    stdin: TextIO,
    stdout: TextIO,
    config: EvaluatorConfig | None = None,
) -> int:
    """Обработка входного потока построчно до EOF.

    Args:
        stdin: источник выражений
        stdout: приёмник результатов
        config: конфигурация вычислителя

    Returns:
        Код возврата (всегда 0)
    """
    evaluator = Evaluator(config)
    processed = 0
    failed = 0

    for line in stdin:
        result = evaluator.evaluate(line.rstrip("\r\n"))
        processed += 1
        if not result.ok:
            failed += 1
            log.info(
                "Line rejected",
                line_no=processed,
                kind=result.error.kind.value,
                error=result.error.message,
            )
        stdout.write(result.message + "\n")

    log.debug("Input exhausted", processed=processed, failed=failed)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roman-calc",
        description="Evaluate arithmetic expressions over Roman numerals, one per line",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject non-canonical numerals such as IIX or VX",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)
    return run(sys.stdin, sys.stdout, EvaluatorConfig(strict_numerals=args.strict))
