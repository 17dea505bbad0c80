"""Свёртка postfix-последовательности в одно целое.

Value кладётся на стек результатов; Operator снимает right, затем left
и кладёт результат apply(left, right). В конце на стеке должен остаться
ровно один Value.
"""

from src.core.domain.element import Element, Operator, TokenSequence, Value
from src.core.errors import MalformedExpression


def reduce_postfix(tokens: TokenSequence) -> int:
    """Вычисление postfix-последовательности.

    Args:
        tokens: последовательность от парсера

    Returns:
        Итоговое целое; 0 для пустой последовательности

    Raises:
        MalformedExpression: недостаточно операндов, не-Value среди операндов,
            больше одного остатка
        DivisionByZero: из Operator.apply
        RomanOverflow: промежуточный результат вне int64
    """
    if not tokens:
        return 0

    stack: list[Element] = []

    for element in tokens:
        if isinstance(element, Operator):
            if len(stack) < 2:
                raise MalformedExpression()
            right = stack.pop()
            left = stack.pop()
            if not isinstance(left, Value) or not isinstance(right, Value):
                raise MalformedExpression()
            stack.append(element.apply(left, right))
        else:
            stack.append(element)

    if len(stack) != 1 or not isinstance(stack[0], Value):
        raise MalformedExpression()

    return stack[0].value
