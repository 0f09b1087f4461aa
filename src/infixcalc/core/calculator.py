"""
Calculator — фасад конвейера tokenize → to_postfix → evaluate_postfix

calculate() пробрасывает первую ошибку как есть (без обёртки и частичного
результата). evaluate_expression() выполняет тот же конвейер, но сохраняет
промежуточные токены и превращает CalculationError в CalculationErrorInfo.
"""

from pydantic import BaseModel, Field, field_validator

from infixcalc.core.errors import CalculationError
from infixcalc.core.postfix_evaluator import evaluate_postfix
from infixcalc.core.shunting_yard import to_postfix
from infixcalc.core.tokenizer import tokenize


# =============================================================================
# RESULT MODELS
# =============================================================================


class CalculationErrorInfo(BaseModel):
    """Описание ошибки вычисления."""

    kind: str = Field(..., min_length=1, description="Имя класса ошибки (например, 'InvalidNumber')")
    message: str = Field(..., description="Сообщение ошибки")

    model_config = {"frozen": True}

    @classmethod
    def from_exception(cls, exc: CalculationError) -> "CalculationErrorInfo":
        return cls(kind=type(exc).__name__, message=str(exc))


class CalculationResult(BaseModel):
    """
    Результат вычисления одного выражения.

    Immutable модель (frozen=True). Ровно одно из value / error задано.
    postfix пуст, если ошибка возникла до конвертации в postfix.
    """

    expression: str = Field(..., description="Исходное выражение")
    tokens: list[str] = Field(default_factory=list, description="Токены infix")
    postfix: list[str] = Field(default_factory=list, description="Токены postfix")
    value: float | None = Field(None, description="Результат вычисления")
    error: CalculationErrorInfo | None = Field(
        None, validate_default=True, description="Ошибка вычисления"
    )

    model_config = {"frozen": True}

    @field_validator("error")
    @classmethod
    def validate_value_xor_error(
        cls, v: CalculationErrorInfo | None, info
    ) -> CalculationErrorInfo | None:
        """Проверка, что задано ровно одно из value / error"""
        value = info.data.get("value")
        if v is None and value is None:
            raise ValueError("either value or error must be set")
        if v is not None and value is not None:
            raise ValueError("value and error are mutually exclusive")
        return v

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# FACADE
# =============================================================================


def calculate(expression: str) -> float:
    """
    Вычисление infix выражения.

    Args:
        expression: infix выражение (например, "2 * (3 + 4 * 5) - 6")

    Returns:
        Результат (float)

    Raises:
        MismatchedParentheses: несбалансированные скобки
        InsufficientOperands: оператору не хватает операндов
        InvalidNumber: некорректный литерал
        MalformedExpression: выражение не сводится к одному значению

    Examples:
        >>> calculate("3*(3+11-4)/2")
        15.0
    """
    postfix = to_postfix(tokenize(expression))
    return evaluate_postfix(postfix)


def evaluate_expression(expression: str) -> CalculationResult:
    """
    Вычисление выражения с сохранением промежуточных стадий.

    Не бросает CalculationError: ошибка возвращается в поле error.

    Args:
        expression: infix выражение

    Returns:
        CalculationResult с tokens, postfix и value либо error
    """
    tokens = tokenize(expression)
    postfix: list[str] = []

    try:
        postfix = to_postfix(tokens)
        value = evaluate_postfix(postfix)
    except CalculationError as exc:
        return CalculationResult(
            expression=expression,
            tokens=tokens,
            postfix=postfix,
            error=CalculationErrorInfo.from_exception(exc),
        )

    return CalculationResult(
        expression=expression,
        tokens=tokens,
        postfix=postfix,
        value=value,
    )
