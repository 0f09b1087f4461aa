"""
Operators — фиксированная таблица бинарных операторов

Таблица OPERATORS строится один раз при импорте и доступна только на чтение
(MappingProxyType), поэтому безопасно разделяется между потоками без блокировок.

| symbol | precedence | left_associative |
|--------|------------|------------------|
| +      | 1          | True             |
| -      | 1          | True             |
| *      | 2          | True             |
| /      | 2          | True             |

ИНВАРИАНТЫ:
1. Каждый symbol — ровно один символ
2. symbol не пересекается с цифрами, '.', '(' , ')' и пробельными символами
3. Таблица не мутирует в runtime
"""

import math
from types import MappingProxyType
from typing import Callable, Final, Mapping

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

LEFT_PAREN: Final[str] = "("
RIGHT_PAREN: Final[str] = ")"

# Символы, зарезервированные за литералами и скобками
RESERVED_CHARS: Final[frozenset[str]] = frozenset("0123456789.()")


# =============================================================================
# ARITHMETIC
# =============================================================================


def ieee_divide(a: float, b: float) -> float:
    """
    Деление по семантике IEEE-754 (без ZeroDivisionError).

    Returns:
        a / b; для b == 0: ±inf по правилу знаков, nan для 0/0 и nan/0

    Examples:
        >>> ieee_divide(7.0, 3.5)
        2.0
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


# =============================================================================
# OPERATOR MODEL
# =============================================================================


class Operator(BaseModel):
    """
    Бинарный оператор: символ, приоритет, ассоциативность и функция.

    Immutable модель (frozen=True).
    """

    symbol: str = Field(..., min_length=1, max_length=1, description="Символ оператора")
    precedence: int = Field(..., gt=0, description="Приоритет (больше — связывает сильнее)")
    left_associative: bool = Field(True, description="Левая ассоциативность")
    apply: Callable[[float, float], float] = Field(..., description="apply(a, b) → float")

    model_config = {"frozen": True}

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Символ не должен совпадать с символами литералов, скобок и пробелов."""
        if v in RESERVED_CHARS or v.isspace():
            raise ValueError(f"operator symbol {v!r} is reserved")
        return v


OPERATORS: Final[Mapping[str, Operator]] = MappingProxyType(
    {
        "+": Operator(symbol="+", precedence=1, left_associative=True, apply=lambda a, b: a + b),
        "-": Operator(symbol="-", precedence=1, left_associative=True, apply=lambda a, b: a - b),
        "*": Operator(symbol="*", precedence=2, left_associative=True, apply=lambda a, b: a * b),
        "/": Operator(symbol="/", precedence=2, left_associative=True, apply=ieee_divide),
    }
)


# =============================================================================
# LOOKUPS
# =============================================================================


def is_operator(token: str) -> bool:
    """True если token — символ оператора из таблицы."""
    return token in OPERATORS


def is_parenthesis(token: str) -> bool:
    return token == LEFT_PAREN or token == RIGHT_PAREN


def has_higher_or_equal_precedence(op1: Operator, op2: Operator) -> bool:
    """
    Нужно ли вытолкнуть op1 (вершина стека) перед тем, как положить op2.

    (op1 левоассоциативен и prec1 >= prec2) или (op1 правоассоциативен и prec1 > prec2)

    Для правоассоциативных операторов сравнение строгое; в текущей таблице
    все операторы левоассоциативны, т.е. равные приоритеты выталкиваются.

    Args:
        op1: оператор на вершине стека
        op2: текущий оператор

    Returns:
        True если op1 нужно вытолкнуть в output
    """
    if op1.left_associative:
        return op1.precedence >= op2.precedence
    return op1.precedence > op2.precedence
