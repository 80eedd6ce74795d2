"""
Domain models and value objects.

Contains the BigInteger value type and its config/state snapshot models.
"""

from limbint.core.domain.big_integer import BigInteger
from limbint.core.domain.state import BigIntegerConfig, BigIntegerState

__all__ = [
    "BigInteger",
    "BigIntegerConfig",
    "BigIntegerState",
]
