"""Parser — инфиксное выражение → postfix (shunting-yard)."""

from .shunting_yard import (
    ExpressionParser,
    ParserConfig,
    parse_expression,
    strip_whitespace,
)

__all__ = [
    "ExpressionParser",
    "ParserConfig",
    "parse_expression",
    "strip_whitespace",
]
