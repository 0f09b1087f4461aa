"""
infixcalc — вычисление инфиксных арифметических выражений.

Поддерживаются десятичные числа, операторы + - * /, скобки и пробелы.
"""

from importlib.metadata import version

from infixcalc.core import (
    CalculationError,
    CalculationResult,
    InsufficientOperands,
    InvalidNumber,
    MalformedExpression,
    MismatchedParentheses,
    calculate,
    evaluate_expression,
)

__version__ = version("infixcalc")

__all__ = [
    "CalculationError",
    "CalculationResult",
    "InsufficientOperands",
    "InvalidNumber",
    "MalformedExpression",
    "MismatchedParentheses",
    "calculate",
    "evaluate_expression",
]
