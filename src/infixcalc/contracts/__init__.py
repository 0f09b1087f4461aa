"""
Contract Validation Module

Валидация JSON контрактов infixcalc.
"""

from .validators import (
    CalculationResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationResultValidator",
    # Functions
    "validate_calculation_result",
]
