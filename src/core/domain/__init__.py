"""
Domain models and value objects.

Contains expression elements: Value, Operator, Bracket.
"""

from src.core.domain.element import (
    PRIORITY_ADDITIVE,
    PRIORITY_BRACKET,
    PRIORITY_MULTIPLICATIVE,
    PRIORITY_OPERAND,
    Bracket,
    BracketRole,
    Element,
    Operator,
    TokenSequence,
    Value,
    floor_divide,
    format_tokens,
    is_operator_symbol,
    make_element,
)

__all__ = [
    # Priorities
    "PRIORITY_ADDITIVE",
    "PRIORITY_BRACKET",
    "PRIORITY_MULTIPLICATIVE",
    "PRIORITY_OPERAND",
    # Elements
    "Bracket",
    "BracketRole",
    "Element",
    "Operator",
    "TokenSequence",
    "Value",
    # Functions
    "floor_divide",
    "format_tokens",
    "is_operator_symbol",
    "make_element",
]
