"""Evaluator — вычисление выражений над римскими числами.

Публичная точка входа: evaluate(expression) -> EvaluationResult.
"""

from .evaluator import (
    ERROR_PREFIX,
    EvaluationResult,
    Evaluator,
    EvaluatorConfig,
    evaluate,
    solve,
)
from .postfix import reduce_postfix

__all__ = [
    "ERROR_PREFIX",
    "EvaluationResult",
    "Evaluator",
    "EvaluatorConfig",
    "evaluate",
    "reduce_postfix",
    "solve",
]
