"""Shunting-Yard — преобразование инфиксного выражения в postfix.

Сканирует выражение (пробелы удаляются заранее) и строит TokenSequence:
- Римские числа читаются максимальной серией символов через NumeralCodec
- Унарный минус сворачивается в знак следующего операнда или скобочной группы
- Левоассоциативные операторы выталкиваются по приоритету
- Скобки выталкиваются только явно, на ")"

Ошибки:
- BadSymbol(position) — символ вне алфавита
- BracketMismatch — лишняя ")" или незакрытая "("
- InvalidNumeral — серия символов не является римским числом
"""

from dataclasses import dataclass
import logging

import structlog

from src.core.domain.element import (
    CLOSE_BRACKET,
    OPEN_BRACKET,
    Bracket,
    BracketRole,
    Element,
    Operator,
    TokenSequence,
    Value,
    format_tokens,
    is_operator_symbol,
    make_element,
)
from src.core.errors import BracketMismatch
from src.core.numerals import is_numeral_symbol, to_int64

# Вывод идёт через stdlib logging: без настройки debug-события отбрасываются
log = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация парсера.

    strict_numerals: отклонять неканонические римские записи ("IIX", "VX")
    """

    strict_numerals: bool = False


def strip_whitespace(expression: str) -> str:
    """Удаление всех пробельных символов."""
    return "".join(expression.split())


class ExpressionParser:
    """Парсер выражения в postfix-последовательность (shunting-yard).

    Состояние (курсор, рабочий стек, выход) создаётся заново на каждый вызов
    parse(), поэтому один экземпляр можно использовать из нескольких потоков.
    """

    def __init__(self, config: ParserConfig | None = None):
        """
        Args:
            config: конфигурация парсера (опционально, используется default)
        """
        self.config = config or ParserConfig()

    def parse(self, expression: str) -> TokenSequence:
        """Построение postfix-последовательности.

        Args:
            expression: исходная строка, пробелы допускаются в любом месте

        Returns:
            TokenSequence в postfix-порядке; пустая для пустого выражения

        Raises:
            BadSymbol, BracketMismatch, InvalidNumeral
        """
        data = strip_whitespace(expression)
        stack: list[Element] = []
        out: list[Element] = []
        unarity = 1
        position = 0

        while position < len(data):
            symbol = data[position]

            # 1. Операнд: максимальная серия римских символов
            if is_numeral_symbol(symbol):
                end = position
                while end < len(data) and is_numeral_symbol(data[end]):
                    end += 1
                number = to_int64(data[position:end], strict=self.config.strict_numerals)
                out.append(Value(value=number * unarity))
                unarity = 1
                position = end
                continue

            # 2. Унарный минус: знак откладывается до следующего операнда или "("
            if self._is_unary_minus(data, position):
                unarity = -1
                position += 1
                continue

            # 3. Оператор или скобка; иной символ → BadSymbol
            element = make_element(symbol, position + 1)

            if isinstance(element, Operator):
                while stack and stack[-1].priority >= element.priority:
                    out.append(stack.pop())
                stack.append(element)
            elif element.role == BracketRole.OPEN:
                # Отступление от буквального сброса unarity на "(": знак
                # хранится на скобке и применяется при её закрытии, -(II) → -II
                if unarity < 0:
                    element = element.model_copy(update={"sign": -1})
                stack.append(element)
            else:
                self._close_group(stack, out)

            unarity = 1
            position += 1

        while stack:
            element = stack.pop()
            if not isinstance(element, Operator):
                raise BracketMismatch()
            out.append(element)

        tokens = tuple(out)
        log.debug("Expression parsed", expression=data, postfix=format_tokens(tokens))
        return tokens

    def _close_group(self, stack: list[Element], out: list[Element]) -> None:
        """Выталкивание операторов до парной "(".

        Если перед группой стоял унарный минус, к выходу добавляется
        умножение на -1.
        """
        while stack and not isinstance(stack[-1], Bracket):
            out.append(stack.pop())

        if not stack:
            raise BracketMismatch()

        bracket = stack.pop()
        if bracket.sign < 0:
            out.append(Value(value=-1))
            out.append(Operator(symbol="*"))

    def _is_unary_minus(self, data: str, position: int) -> bool:
        """Является ли "-" на позиции унарным.

        Условие: символ "-", И следующий символ "(" или римский,
        И (позиция 0 ИЛИ предыдущий символ — оператор или ")").
        """
        if data[position] != "-":
            return False

        if position + 1 >= len(data):
            return False
        following = data[position + 1]
        if following != OPEN_BRACKET and not is_numeral_symbol(following):
            return False

        if position == 0:
            return True
        previous = data[position - 1]
        return is_operator_symbol(previous) or previous == CLOSE_BRACKET


def parse_expression(expression: str, config: ParserConfig | None = None) -> TokenSequence:
    """Convenience-обёртка над ExpressionParser.parse."""
    return ExpressionParser(config).parse(expression)
