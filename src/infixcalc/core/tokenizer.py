"""
Tokenizer — разбиение строки выражения на токены

Токен — строка одного из видов:
- числовой литерал (цифры и не более одной '.')
- символ оператора из OPERATORS
- '(' или ')'

Tokenizer никогда не падает. Символы внутри буфера литерала НЕ валидируются:
любой неизвестный символ накапливается в литерал и отклоняется позже,
при вычислении (InvalidNumber).
"""

from infixcalc.core.operators import is_operator, is_parenthesis


def tokenize(expression: str) -> list[str]:
    """
    Разбиение infix выражения на токены.

    Args:
        expression: строка выражения (например, "3*(3+11-4)/2")

    Returns:
        Список токенов в порядке появления

    Examples:
        >>> tokenize("3 + 5")
        ['3', '+', '5']
        >>> tokenize("(1.5+2)*4")
        ['(', '1.5', '+', '2', ')', '*', '4']
        >>> tokenize("2 x")
        ['2', 'x']
    """
    tokens: list[str] = []
    buffer = ""

    for char in expression:
        if is_operator(char) or is_parenthesis(char):
            if buffer:
                tokens.append(buffer)
                buffer = ""
            tokens.append(char)
        elif char.isspace():
            if buffer:
                tokens.append(buffer)
                buffer = ""
        else:
            buffer += char

    if buffer:
        tokens.append(buffer)

    return tokens
