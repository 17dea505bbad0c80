"""CLI — консольный драйвер вычислителя."""

from .repl import build_arg_parser, configure_logging, main, run

__all__ = [
    "build_arg_parser",
    "configure_logging",
    "main",
    "run",
]
