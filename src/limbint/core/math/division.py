"""
Division — деление модулей бинарным поиском частного

Инвариант поиска: low * divisor <= dividend < high * divisor.
middle считается через add_magnitudes и divide_by_small, без native int.
"""

import logging
import operator

from limbint.core.errors import BigIntegerDivisionByZero
from limbint.core.math.limbs import (
    Limbs,
    add_magnitudes,
    compare_magnitudes,
    divide_by_small,
    increment_magnitude_inplace,
    is_unit_magnitude,
    is_zero_magnitude,
    multiply_magnitudes,
    subtract_magnitudes,
)

logger = logging.getLogger(__name__)


def search_upper_bound(dividend_size: int, divisor_size: int) -> Limbs:
    """
    Верхняя граница поиска: 1, за которой следуют
    dividend_size - divisor_size + 1 нулевых limbs.
    """
    span = dividend_size - divisor_size + 2
    return [0] * (span - 1) + [1]


def divide_magnitudes(dividend: Limbs, divisor: Limbs) -> Limbs:
    """
    Частное |dividend| / |divisor| с усечением.

    1. |dividend| < |divisor| → 0
    2. |divisor| == 1 → копия dividend
    3. Иначе бинарный поиск middle, пока остаток не попадёт в [0, divisor)

    Args:
        dividend: Модуль делимого (нормализованный)
        divisor: Модуль делителя (нормализованный)

    Returns:
        Модуль частного (новый список)

    Raises:
        BigIntegerDivisionByZero: если divisor == 0
    """
    if is_zero_magnitude(divisor):
        logger.debug("division by zero magnitude, dividend size=%d", len(dividend))
        raise BigIntegerDivisionByZero()

    if compare_magnitudes(dividend, divisor, operator.lt):
        return [0]

    if is_unit_magnitude(divisor):
        return list(dividend)

    low: Limbs = [1]
    high = search_upper_bound(len(dividend), len(divisor))
    iterations = 0

    while True:
        iterations += 1
        middle, _ = divide_by_small(add_magnitudes(low, high), 2)
        product = multiply_magnitudes(middle, divisor)

        if compare_magnitudes(product, dividend, operator.gt):
            high = middle
            continue

        remainder = subtract_magnitudes(dividend, product)
        if compare_magnitudes(remainder, divisor, operator.gt):
            low = middle
        elif compare_magnitudes(remainder, divisor, operator.lt):
            break
        else:
            # remainder == divisor: частное на единицу больше middle
            increment_magnitude_inplace(middle)
            break

    logger.debug(
        "division search converged in %d iterations (dividend=%d limbs, divisor=%d limbs)",
        iterations,
        len(dividend),
        len(divisor),
    )
    return middle
