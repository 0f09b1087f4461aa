"""
Calculation Errors — типизированные ошибки вычисления выражений

Каждая ошибка терминальна для одного вызова calculate():
- MismatchedParentheses: несбалансированные скобки (infix → postfix)
- InsufficientOperands: оператору не хватает операндов (postfix evaluation)
- InvalidNumber: литерал не разбирается как float (postfix evaluation)
- MalformedExpression: после вычисления на стеке не ровно одно значение

Сообщения ссылаются только на проблемный символ или на выражение целиком
(токены не несут позиционной информации).
"""


class CalculationError(Exception):
    """Базовый класс для ошибок вычисления выражения."""


class MismatchedParentheses(CalculationError):
    """
    Несбалансированные скобки.

    Обнаруживается при конвертации infix → postfix:
    - ')' без соответствующей '('
    - '(' оставшаяся на стеке после обработки всех токенов
    """

    def __init__(self, message: str = "mismatched parentheses"):
        super().__init__(message)


class InsufficientOperands(CalculationError):
    """Оператор встречен, когда на стеке меньше двух операндов."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"insufficient values for operator '{operator}'")


class InvalidNumber(CalculationError):
    """
    Токен не может быть разобран как float литерал.

    Включает случайные символы, которые tokenizer накопил в буфере литерала.
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid number: {token}")


class MalformedExpression(CalculationError):
    """Postfix выражение не сводится к единственному значению."""

    def __init__(self, stack_size: int):
        self.stack_size = stack_size
        super().__init__(
            f"invalid postfix expression: {stack_size} values left on stack, expected 1"
        )
