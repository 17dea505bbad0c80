"""Evaluator — точка входа: выражение → римская запись результата.

Цепочка:
1. ExpressionParser: строка → postfix TokenSequence
2. reduce_postfix: TokenSequence → int
3. to_roman: int → римская запись (RomanOverflow при |value| > 3999)

evaluate() не бросает исключений вычисления: любая EvalError
возвращается внутри EvaluationResult. solve() — бросающий вариант.
"""

from dataclasses import dataclass
import logging

import structlog

from src.core.domain.element import TokenSequence
from src.core.errors import EvalError
from src.core.numerals import to_roman
from src.evaluator.postfix import reduce_postfix
from src.parser import ExpressionParser, ParserConfig

# Вывод идёт через stdlib logging: без настройки debug-события отбрасываются
log = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

ERROR_PREFIX = "error: "


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления одного выражения."""

    expression: str

    # Римская запись результата (None при ошибке)
    value: str | None

    # Ошибка, прервавшая вычисление (None при успехе)
    error: EvalError | None

    # Postfix-последовательность, если парсинг успел завершиться
    tokens: TokenSequence = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Строка для вывода: римская запись или "error: <описание>"."""
        if self.error is not None:
            return f"{ERROR_PREFIX}{self.error.message}"
        return self.value or ""

    def unwrap(self) -> str:
        """Римская запись результата; при ошибке повторно бросает её."""
        if self.error is not None:
            raise self.error
        return self.value or ""


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация вычислителя.

    strict_numerals: отклонять неканонические римские записи в операндах
    """

    strict_numerals: bool = False


# =============================================================================
# EVALUATOR
# =============================================================================


class Evaluator:
    """Вычислитель выражений над римскими числами.

    Stateless: всё рабочее состояние живёт внутри одного вызова.
    """

    def __init__(self, config: EvaluatorConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or EvaluatorConfig()
        self._parser = ExpressionParser(
            ParserConfig(strict_numerals=self.config.strict_numerals)
        )

    def evaluate(self, expression: str) -> EvaluationResult:
        """Вычисление выражения без исключений.

        Args:
            expression: строка вида "II + III * (X - IV)"

        Returns:
            EvaluationResult с value либо error
        """
        tokens: TokenSequence = ()
        try:
            tokens = self._parser.parse(expression)
            number = reduce_postfix(tokens)
            value = to_roman(number)
        except EvalError as e:
            log.debug(
                "Expression failed",
                expression=expression,
                kind=e.kind.value,
                error=e.message,
            )
            return EvaluationResult(
                expression=expression, value=None, error=e, tokens=tokens
            )

        log.debug("Expression evaluated", expression=expression, result=value)
        return EvaluationResult(
            expression=expression, value=value, error=None, tokens=tokens
        )

    def solve(self, expression: str) -> str:
        """Вычисление выражения с исключением при ошибке.

        Raises:
            EvalError: любая ошибка парсинга, вычисления или рендеринга
        """
        return self.evaluate(expression).unwrap()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def evaluate(expression: str, config: EvaluatorConfig | None = None) -> EvaluationResult:
    """Вычисление выражения с default-конфигурацией.

    Examples:
        >>> evaluate("II+III").value
        'V'
        >>> evaluate("X/Z").error.kind
        <ErrorKind.DIVISION_BY_ZERO: 'DIVISION_BY_ZERO'>
    """
    return Evaluator(config).evaluate(expression)


def solve(expression: str, config: EvaluatorConfig | None = None) -> str:
    """Бросающий вариант evaluate().

    Raises:
        EvalError
    """
    return Evaluator(config).solve(expression)
