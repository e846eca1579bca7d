"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованного Decimal.
"""

from .validators import (
    ContractValidator,
    DecimalContractValidator,
    SchemaLoader,
    decimal_from_payload,
    decimal_to_payload,
    validate_decimal_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalContractValidator",
    # Functions
    "validate_decimal_payload",
    "decimal_to_payload",
    "decimal_from_payload",
]
