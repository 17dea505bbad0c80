"""
Element — элементы арифметического выражения

Immutable Pydantic модели для трёх видов токенов:
- Value: числовой операнд
- Operator: бинарная операция (+, -, *, /) с приоритетом
- Bracket: открывающая/закрывающая скобка

Element — сумма трёх вариантов; парсер и вычислитель различают их через isinstance.
Operator несёт арифметику, включая floor division.
"""

from enum import Enum
from typing import Final, Literal, Union

from pydantic import BaseModel, Field

from src.core.errors import BadSymbol, DivisionByZero, RomanOverflow

# =============================================================================
# ПРИОРИТЕТЫ
# =============================================================================

# Операнды выше любого оператора
PRIORITY_OPERAND: Final[int] = 3

# *, /
PRIORITY_MULTIPLICATIVE: Final[int] = 1

# +, -
PRIORITY_ADDITIVE: Final[int] = 0

# Скобки ниже любого оператора: выталкиваются только явно на ")"
PRIORITY_BRACKET: Final[int] = -1

OPERATOR_PRIORITIES: Final[dict[str, int]] = {
    "+": PRIORITY_ADDITIVE,
    "-": PRIORITY_ADDITIVE,
    "*": PRIORITY_MULTIPLICATIVE,
    "/": PRIORITY_MULTIPLICATIVE,
}

OPEN_BRACKET: Final[str] = "("
CLOSE_BRACKET: Final[str] = ")"

# Границы знакового 64-битного целого для промежуточных результатов
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ENUMS
# =============================================================================


class BracketRole(str, Enum):
    """Роль скобки"""

    OPEN = "open"
    CLOSE = "close"


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def floor_divide(left: int, right: int) -> int:
    """
    Целочисленное деление с округлением к минус бесконечности.

    - Знаки совпадают (или left == 0): обычное усечение
    - Знаки различаются: -((|left| + |right| - 1) // |right|)

    Raises:
        DivisionByZero: если right == 0

    Examples:
        >>> floor_divide(10, 3)
        3
        >>> floor_divide(-10, 3)
        -4
        >>> floor_divide(-9, 3)
        -3
    """
    if right == 0:
        raise DivisionByZero()

    if (left <= 0 and right < 0) or (left >= 0 and right > 0):
        return abs(left) // abs(right)

    return -((abs(left) + abs(right) - 1) // abs(right))


def _checked_int64(value: int) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise RomanOverflow(value)
    return value


# =============================================================================
# ELEMENTS
# =============================================================================


class Value(BaseModel):
    """Числовой операнд. Приоритет зафиксирован на уровне операнда."""

    value: int = Field(..., description="Знаковое целое значение операнда")

    model_config = {"frozen": True}

    @property
    def priority(self) -> int:
        return PRIORITY_OPERAND


class Operator(BaseModel):
    """
    Бинарная операция.

    Приоритет выводится из символа: + и - → 0, * и / → 1.
    """

    symbol: Literal["+", "-", "*", "/"] = Field(..., description="Символ операции")

    model_config = {"frozen": True}

    @property
    def priority(self) -> int:
        return OPERATOR_PRIORITIES[self.symbol]

    def apply(self, left: Value, right: Value) -> Value:
        """
        Применение операции к двум операндам.

        Args:
            left: Левый операнд
            right: Правый операнд

        Returns:
            Новый Value с результатом

        Raises:
            DivisionByZero: "/" с правым операндом 0
            RomanOverflow: результат вне диапазона int64
        """
        a = left.value
        b = right.value

        if self.symbol == "+":
            result = a + b
        elif self.symbol == "-":
            result = a - b
        elif self.symbol == "*":
            result = a * b
        else:
            result = floor_divide(a, b)

        return Value(value=_checked_int64(result))


class Bracket(BaseModel):
    """
    Скобка.

    sign = -1 у открывающей скобки, перед которой стоял унарный минус:
    результат группы инвертируется при её закрытии.
    """

    role: BracketRole = Field(..., description="Открывающая или закрывающая")
    sign: Literal[1, -1] = Field(1, description="Множитель результата группы")

    model_config = {"frozen": True}

    @property
    def priority(self) -> int:
        return PRIORITY_BRACKET


Element = Union[Value, Operator, Bracket]

# Postfix-последовательность, неизменяемая после построения
TokenSequence = tuple[Element, ...]


# =============================================================================
# ФАБРИКИ
# =============================================================================


def is_operator_symbol(symbol: str) -> bool:
    return symbol in OPERATOR_PRIORITIES


def make_element(symbol: str, position: int = 0) -> Operator | Bracket:
    """
    Построение Operator или Bracket по символу.

    Args:
        symbol: Один из "+-*/()"
        position: 1-based позиция символа (для сообщения об ошибке)

    Raises:
        BadSymbol: символ не является оператором или скобкой
    """
    if is_operator_symbol(symbol):
        return Operator(symbol=symbol)
    if symbol == OPEN_BRACKET:
        return Bracket(role=BracketRole.OPEN)
    if symbol == CLOSE_BRACKET:
        return Bracket(role=BracketRole.CLOSE)
    raise BadSymbol(position, symbol)


def format_tokens(tokens: TokenSequence) -> str:
    """Человекочитаемая запись postfix-последовательности (для логов)."""
    parts = []
    for element in tokens:
        if isinstance(element, Value):
            parts.append(str(element.value))
        elif isinstance(element, Operator):
            parts.append(element.symbol)
        else:
            parts.append(OPEN_BRACKET if element.role == BracketRole.OPEN else CLOSE_BRACKET)
    return " ".join(parts)
