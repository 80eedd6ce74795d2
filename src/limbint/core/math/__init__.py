"""
Core math modules для limbint

Арифметика над модулями в базе 10000, деление бинарным поиском,
десятичный кодек.
"""

# Limbs (представление и примитивы)
from limbint.core.math.limbs import (
    # Constants
    DEFAULT_CAPACITY,
    LIMB_BASE,
    LIMB_DIGITS,
    MAX_CAPACITY,
    # Conversion
    limbs_from_int,
    limbs_to_int,
    # Normalization & predicates
    ensure_capacity,
    is_unit_magnitude,
    is_zero_magnitude,
    trim_inplace,
    # Arithmetic
    add_magnitudes,
    compare_magnitudes,
    decrement_magnitude_inplace,
    divide_by_small,
    increment_magnitude_inplace,
    multiply_magnitudes,
    subtract_magnitudes,
)

# Division
from limbint.core.math.division import divide_magnitudes, search_upper_bound

# Decimal codec
from limbint.core.math.decimal_codec import (
    DECIMAL_PATTERN,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Limbs — Constants
    "DEFAULT_CAPACITY",
    "LIMB_BASE",
    "LIMB_DIGITS",
    "MAX_CAPACITY",
    # Limbs — Conversion
    "limbs_from_int",
    "limbs_to_int",
    # Limbs — Normalization & predicates
    "ensure_capacity",
    "is_unit_magnitude",
    "is_zero_magnitude",
    "trim_inplace",
    # Limbs — Arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "decrement_magnitude_inplace",
    "divide_by_small",
    "increment_magnitude_inplace",
    "multiply_magnitudes",
    "subtract_magnitudes",
    # Division
    "divide_magnitudes",
    "search_upper_bound",
    # Decimal codec
    "DECIMAL_PATTERN",
    "format_decimal",
    "parse_decimal",
]
