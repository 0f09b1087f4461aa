"""
Shunting Yard — конвертация infix → postfix (Reverse Polish Notation)

Порядок обработки токенов:
1. Оператор: выталкиваем с вершины стека операторы, для которых
   has_higher_or_equal_precedence(top, current), затем кладём current
2. '(' : кладём на стек
3. ')' : выталкиваем операторы до '('; '(' отбрасываем
4. Литерал: сразу в output (без валидации)
5. В конце выталкиваем остаток стека в output

Несбалансированные скобки → MismatchedParentheses.
Ошибки количества операндов откладываются до вычисления postfix.
"""

from typing import Iterable

from infixcalc.core.errors import MismatchedParentheses
from infixcalc.core.operators import (
    LEFT_PAREN,
    OPERATORS,
    RIGHT_PAREN,
    has_higher_or_equal_precedence,
    is_parenthesis,
)


def to_postfix(tokens: Iterable[str]) -> list[str]:
    """
    Конвертация последовательности infix токенов в postfix.

    Args:
        tokens: токены от tokenize()

    Returns:
        Токены в postfix порядке

    Raises:
        MismatchedParentheses: если скобки несбалансированы

    Examples:
        >>> to_postfix(["1", "+", "2", "*", "5"])
        ['1', '2', '5', '*', '+']
        >>> to_postfix(["(", "1", "+", "2", ")", "*", "5"])
        ['1', '2', '+', '5', '*']
    """
    output: list[str] = []
    stack: list[str] = []

    for token in tokens:
        current = OPERATORS.get(token)

        if current is not None:
            while stack and stack[-1] in OPERATORS:
                if not has_higher_or_equal_precedence(OPERATORS[stack[-1]], current):
                    break
                output.append(stack.pop())
            stack.append(token)

        elif token == LEFT_PAREN:
            stack.append(token)

        elif token == RIGHT_PAREN:
            while stack and stack[-1] != LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses()
            stack.pop()

        else:
            output.append(token)

    while stack:
        top = stack.pop()
        # Незакрытая '(' осталась на стеке
        if is_parenthesis(top):
            raise MismatchedParentheses()
        output.append(top)

    return output
