"""
Core модули infixcalc

Конвейер: tokenize → to_postfix (Shunting Yard) → evaluate_postfix.
"""

# Errors
from infixcalc.core.errors import (
    CalculationError,
    InsufficientOperands,
    InvalidNumber,
    MalformedExpression,
    MismatchedParentheses,
)

# Operators
from infixcalc.core.operators import (
    LEFT_PAREN,
    OPERATORS,
    RIGHT_PAREN,
    Operator,
    has_higher_or_equal_precedence,
    ieee_divide,
    is_operator,
    is_parenthesis,
)

# Pipeline stages
from infixcalc.core.tokenizer import tokenize
from infixcalc.core.shunting_yard import to_postfix
from infixcalc.core.postfix_evaluator import evaluate_postfix, parse_number

# Facade
from infixcalc.core.calculator import (
    CalculationErrorInfo,
    CalculationResult,
    calculate,
    evaluate_expression,
)

__all__ = [
    # Errors
    "CalculationError",
    "InsufficientOperands",
    "InvalidNumber",
    "MalformedExpression",
    "MismatchedParentheses",
    # Operators
    "LEFT_PAREN",
    "OPERATORS",
    "RIGHT_PAREN",
    "Operator",
    "has_higher_or_equal_precedence",
    "ieee_divide",
    "is_operator",
    "is_parenthesis",
    # Pipeline stages
    "tokenize",
    "to_postfix",
    "evaluate_postfix",
    "parse_number",
    # Facade
    "CalculationErrorInfo",
    "CalculationResult",
    "calculate",
    "evaluate_expression",
]
