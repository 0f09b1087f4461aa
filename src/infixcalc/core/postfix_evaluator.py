"""
Postfix Evaluator — вычисление выражения в Reverse Polish Notation

Operand stack живёт только в пределах одного вызова evaluate_postfix().

Порядок обработки токенов:
- Оператор: pop b, затем pop a (вершина стека — ВТОРОЙ операнд),
  push apply(a, b)
- Литерал: parse_number(token) → push

Деление на ноль следует IEEE-754 (inf/nan) и не является ошибкой.
"""

from typing import Iterable

from infixcalc.core.errors import InsufficientOperands, InvalidNumber, MalformedExpression
from infixcalc.core.operators import OPERATORS


def parse_number(token: str) -> float:
    """
    Разбор числового литерала.

    Принимается синтаксис float(), кроме разделителей '_' и не-ASCII цифр.

    Raises:
        InvalidNumber: если token не является float литералом
    """
    if "_" in token or not token.isascii():
        raise InvalidNumber(token)
    try:
        return float(token)
    except ValueError:
        raise InvalidNumber(token) from None


def evaluate_postfix(tokens: Iterable[str]) -> float:
    """
    Вычисление postfix выражения.

    Args:
        tokens: токены в postfix порядке (результат to_postfix())

    Returns:
        Результат вычисления (float)

    Raises:
        InsufficientOperands: оператор при менее чем двух значениях на стеке
        InvalidNumber: литерал не разбирается как float
        MalformedExpression: в конце на стеке не ровно одно значение

    Examples:
        >>> evaluate_postfix(["1", "2", "5", "*", "+"])
        11.0
        >>> evaluate_postfix(["1", "3", "4", "-", "/"])
        -1.0
    """
    stack: list[float] = []

    for token in tokens:
        operator = OPERATORS.get(token)

        if operator is not None:
            if len(stack) < 2:
                raise InsufficientOperands(token)
            b = stack.pop()
            a = stack.pop()
            stack.append(operator.apply(a, b))
        else:
            stack.append(parse_number(token))

    if len(stack) != 1:
        raise MalformedExpression(len(stack))

    return stack[0]
