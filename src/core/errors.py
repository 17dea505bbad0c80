"""
Errors — типизированные ошибки вычисления выражений

Каждая ошибка прерывает только текущее выражение:
- BadSymbol: символ вне алфавита numeral/operator/bracket
- BracketMismatch: несбалансированные скобки
- MalformedExpression: некорректная форма стека при свёртке postfix
- DivisionByZero: правый операнд `/` равен нулю
- RomanOverflow: |value| > 3999 при рендеринге (или выход за int64)
- InvalidNumeral: строка не является допустимой римской записью

Сообщения совпадают с тем, что печатает консольный драйвер после "error: ".
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Категория ошибки вычисления"""

    BAD_SYMBOL = "BAD_SYMBOL"
    BRACKET_MISMATCH = "BRACKET_MISMATCH"
    MALFORMED_EXPRESSION = "MALFORMED_EXPRESSION"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    ROMAN_OVERFLOW = "ROMAN_OVERFLOW"
    INVALID_NUMERAL = "INVALID_NUMERAL"


class EvalError(Exception):
    """
    Базовая ошибка вычисления выражения.

    Все наследники несут kind для диспетчеризации без isinstance-цепочек
    и человекочитаемое сообщение в str(error).
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadSymbol(EvalError):
    """Недопустимый символ. position — 1-based позиция в строке без пробелов."""

    kind = ErrorKind.BAD_SYMBOL

    def __init__(self, position: int, symbol: str = ""):
        super().__init__(f"Bad symbol on position {position}")
        self.position = position
        self.symbol = symbol


class BracketMismatch(EvalError):
    kind = ErrorKind.BRACKET_MISMATCH

    def __init__(self):
        super().__init__("Invalid bracket sequence in expression")


class MalformedExpression(EvalError):
    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self):
        super().__init__("Invalid expression format")


class DivisionByZero(EvalError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self):
        super().__init__("Division by zero")


class RomanOverflow(EvalError):
    """Значение не представимо: |value| > 3999 или вне диапазона int64."""

    kind = ErrorKind.ROMAN_OVERFLOW

    def __init__(self, value: int):
        super().__init__("Roman number overflow")
        self.value = value


class InvalidNumeral(EvalError):
    """
    Строка не является римским числом.

    Возникает при смешении нулевого символа "Z" с другими символами,
    пустой строке, символе вне алфавита, а в strict-режиме —
    на неканонической записи (например, "IIX").
    """

    kind = ErrorKind.INVALID_NUMERAL

    def __init__(self, text: str):
        super().__init__(f"Invalid roman numeral: {text!r}")
        self.text = text
