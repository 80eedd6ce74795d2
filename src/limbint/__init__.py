"""
limbint — знаковые целые фиксированной capacity в базе 10000.
"""

from limbint.core.domain import BigInteger, BigIntegerConfig, BigIntegerState
from limbint.core.errors import (
    BigIntegerDivisionByZero,
    BigIntegerError,
    BigIntegerOverflow,
)
from limbint.core.math.limbs import DEFAULT_CAPACITY, LIMB_BASE, LIMB_DIGITS
from limbint.io import iter_big_integers, read_big_integer, write_big_integer

__version__ = "0.1.0"

__all__ = [
    # Value type
    "BigInteger",
    "BigIntegerConfig",
    "BigIntegerState",
    # Errors
    "BigIntegerError",
    "BigIntegerOverflow",
    "BigIntegerDivisionByZero",
    # Constants
    "DEFAULT_CAPACITY",
    "LIMB_BASE",
    "LIMB_DIGITS",
    # Streams
    "iter_big_integers",
    "read_big_integer",
    "write_big_integer",
]
