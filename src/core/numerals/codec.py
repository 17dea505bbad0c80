"""
Numeral Codec — конверсия римских чисел ↔ знаковые целые

Модуль обеспечивает двустороннее преобразование:
- Римская запись (I, V, X, L, C, D, M) → int
- int в диапазоне [-3999, 3999] → каноническая римская запись
- "Z" — отдельный символ нуля, вне исторической системы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. |value| <= ROMAN_BOUND для любого рендеринга, иначе RomanOverflow
2. Ноль представлен только одиночным "Z" и никогда не смешивается с другими символами
3. to_int64(to_roman(n)) == n для всех n в [-ROMAN_BOUND, ROMAN_BOUND]
4. Таблицы правил неизменяемы и безопасны для конкурентного чтения
"""

from types import MappingProxyType
from typing import Final, Mapping

from src.core.errors import InvalidNumeral, RomanOverflow

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальный модуль представимого значения
ROMAN_BOUND: Final[int] = 3999

# Символ нуля
ZERO_SYMBOL: Final[str] = "Z"

# Префикс отрицательного значения
NEGATIVE_PREFIX: Final[str] = "-"

# Номинал каждого символа (AdditiveRule)
ADDITIVE_RULE: Final[Mapping[str, int]] = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)

# Чистая стоимость допустимых вычитательных пар (SubtractiveRule)
# Значение пары уже включает номинал младшего символа: (I, X) → 9, а не 1 + 9
SUBTRACTIVE_RULE: Final[Mapping[tuple[str, str], int]] = MappingProxyType(
    {
        ("I", "V"): 4,
        ("I", "X"): 9,
        ("X", "L"): 40,
        ("X", "C"): 90,
        ("C", "D"): 400,
        ("C", "M"): 900,
    }
)

# Таблица весов для жадного кодирования, строго по убыванию (WeightTable)
WEIGHT_TABLE: Final[tuple[tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
    (0, ZERO_SYMBOL),
)

# Символы, которые сканер считает частью числа
NUMERAL_SYMBOLS: Final[frozenset[str]] = frozenset(ADDITIVE_RULE) | {ZERO_SYMBOL}


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_numeral_symbol(symbol: str) -> bool:
    """
    Является ли символ частью римского числа (включая "Z").

    Examples:
        >>> is_numeral_symbol("X")
        True
        >>> is_numeral_symbol("Z")
        True
        >>> is_numeral_symbol("+")
        False
    """
    return symbol in NUMERAL_SYMBOLS


def is_canonical(text: str) -> bool:
    """
    Проверка, что запись совпадает с канонической (минимальной) формой своего значения.

    Returns:
        True для "XIV", "-IV", "Z"; False для "IIX", "VX", "IIII", "XZ"
    """
    try:
        value = _decode(text)
    except InvalidNumeral:
        return False
    if abs(value) > ROMAN_BOUND:
        return False
    return to_roman(value) == text


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def to_int64(text: str, strict: bool = False) -> int:
    """
    Конверсия: римская запись → int

    Сканирование слева направо с учётом предыдущего символа:
    - если номинал предыдущего строго меньше текущего, пара (prev, cur)
      даёт свою чистую стоимость из SUBTRACTIVE_RULE, заменяя уже
      добавленный номинал prev;
    - иначе добавляется номинал текущего символа.

    Запись не валидируется на каноничность (permissive): "IIX" даёт 10,
    "IC" даёт 1. Пара вне SUBTRACTIVE_RULE заменяет prev на prev, то есть
    текущий символ ничего не добавляет ("VX" даёт 5).
    С strict=True неканоническая запись отклоняется.

    Args:
        text: Римская запись, опционально с ведущим "-"
        strict: Требовать каноническую форму

    Returns:
        Знаковое целое

    Raises:
        InvalidNumeral: пустая строка, символ вне алфавита, "Z" в составе
            другой записи, либо неканоническая запись при strict=True

    Examples:
        >>> to_int64("Z")
        0
        >>> to_int64("MCMXCIV")
        1994
        >>> to_int64("-IV")
        -4
    """
    value = _decode(text)
    if strict and not is_canonical(text):
        raise InvalidNumeral(text)
    return value


def _decode(text: str) -> int:
    sign = 1
    body = text
    if body.startswith(NEGATIVE_PREFIX):
        sign = -1
        body = body[len(NEGATIVE_PREFIX):]

    if body == ZERO_SYMBOL:
        return 0
    if not body:
        raise InvalidNumeral(text)

    result = 0
    prev_value = 0
    prev_symbol = ""

    for symbol in body:
        current_value = ADDITIVE_RULE.get(symbol)
        if current_value is None:
            # Сюда же попадает "Z" внутри записи
            raise InvalidNumeral(text)

        if prev_symbol and prev_value < current_value:
            pair_value = SUBTRACTIVE_RULE.get(
                (prev_symbol, symbol), prev_value
            )
            result += pair_value - prev_value
        else:
            result += current_value

        prev_symbol = symbol
        prev_value = current_value

    return sign * result


# =============================================================================
# КОДИРОВАНИЕ
# =============================================================================


def to_roman(value: int) -> str:
    """
    Конверсия: int → каноническая римская запись

    Жадное кодирование по WEIGHT_TABLE: на каждом шаге вычитается
    наибольший вес <= остатка. Даёт минимальную по длине запись.

    Args:
        value: Целое в [-ROMAN_BOUND, ROMAN_BOUND]

    Returns:
        "Z" для нуля, "-" + запись модуля для отрицательных

    Raises:
        RomanOverflow: если |value| > ROMAN_BOUND

    Examples:
        >>> to_roman(0)
        'Z'
        >>> to_roman(3999)
        'MMMCMXCIX'
        >>> to_roman(-4)
        '-IV'
    """
    if value == 0:
        return ZERO_SYMBOL
    if abs(value) > ROMAN_BOUND:
        raise RomanOverflow(value)

    parts: list[str] = []
    if value < 0:
        parts.append(NEGATIVE_PREFIX)
        value = -value

    while value > 0:
        for weight, literal in WEIGHT_TABLE:
            if weight and value >= weight:
                value -= weight
                parts.append(literal)
                break

    return "".join(parts)
