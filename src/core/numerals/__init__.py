"""
Numerals — римская система счисления с нулевым символом "Z".
"""

from src.core.numerals.codec import (
    # Constants
    ADDITIVE_RULE,
    NEGATIVE_PREFIX,
    NUMERAL_SYMBOLS,
    ROMAN_BOUND,
    SUBTRACTIVE_RULE,
    WEIGHT_TABLE,
    ZERO_SYMBOL,
    # Predicates
    is_canonical,
    is_numeral_symbol,
    # Conversions
    to_int64,
    to_roman,
)

__all__ = [
    # Constants
    "ADDITIVE_RULE",
    "NEGATIVE_PREFIX",
    "NUMERAL_SYMBOLS",
    "ROMAN_BOUND",
    "SUBTRACTIVE_RULE",
    "WEIGHT_TABLE",
    "ZERO_SYMBOL",
    # Predicates
    "is_canonical",
    "is_numeral_symbol",
    # Conversions
    "to_int64",
    "to_roman",
]
