"""
Contract Validation Module

Валидация JSON контракта сериализованных значений limbint.
"""

from .validators import (
    BigIntegerStateContract,
    SchemaLoader,
    validate_big_integer_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "BigIntegerStateContract",
    # Functions
    "validate_big_integer_state",
]
