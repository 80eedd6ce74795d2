"""
Limbs — примитивы над последовательностями limbs в базе 10000

Модуль содержит всю арифметику над модулями (magnitudes) чисел:
- Нормализация (trim старших нулевых limbs)
- Сравнение модулей через предикат (operator.lt / operator.gt)
- Сложение с переносом, вычитание с заёмом
- Умножение столбиком (schoolbook) с немедленным переносом
- Деление на малое число (halving для бинарного поиска частного)
- Инкремент / декремент модуля
- Контроль capacity

Формат: list[int], младший limb первым, каждый limb в [0, LIMB_BASE).
Знак здесь не участвует: sign-case логика живёт в BigInteger.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой функции нормализован: len >= 1, старший limb != 0 (кроме нуля)
2. Ноль всегда представлен как [0]
3. Входные последовательности не мутируются (кроме явных *_inplace функций)
"""

import logging
from typing import Callable, Final, Sequence

from limbint.core.errors import BigIntegerOverflow

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления limbs: 4 десятичные цифры на limb
LIMB_BASE: Final[int] = 10000

# Число десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 4

# Capacity по умолчанию (в limbs), 160000 десятичных цифр
DEFAULT_CAPACITY: Final[int] = 40000

# Верхняя граница конфигурируемой capacity
MAX_CAPACITY: Final[int] = 1_000_000

Limbs = list[int]


# =============================================================================
# НОРМАЛИЗАЦИЯ И ПРЕДИКАТЫ
# =============================================================================


def trim_inplace(limbs: Limbs) -> Limbs:
    """
    Удаление старших нулевых limbs до минимального размера 1.

    Args:
        limbs: Последовательность limbs (мутируется)

    Returns:
        Та же последовательность (для chaining)
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs


def is_zero_magnitude(limbs: Sequence[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 0


def is_unit_magnitude(limbs: Sequence[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 1


def ensure_capacity(size: int, capacity: int, operation: str) -> None:
    """
    Проверка, что размер результата помещается в capacity.

    Граница точная: size > capacity → отказ. Одна и та же граница
    применяется ко всем операциям и к конструированию.

    Raises:
        BigIntegerOverflow: если size > capacity
    """
    if size > capacity:
        logger.debug(
            "capacity exceeded on %s: size=%d capacity=%d", operation, size, capacity
        )
        raise BigIntegerOverflow(size, capacity, operation)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def limbs_from_int(value: int) -> Limbs:
    """
    Модуль native int → limbs (повторное деление на LIMB_BASE).

    Знак value игнорируется.

    Examples:
        >>> limbs_from_int(123456789)
        [6789, 2345, 1]
        >>> limbs_from_int(0)
        [0]
    """
    value = abs(value)
    if value == 0:
        return [0]
    limbs: Limbs = []
    while value:
        value, limb = divmod(value, LIMB_BASE)
        limbs.append(limb)
    return limbs


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Limbs → неотрицательный native int."""
    value = 0
    for limb in reversed(limbs):
        value = value * LIMB_BASE + limb
    return value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(
    left: Sequence[int],
    right: Sequence[int],
    predicate: Callable[[int, int], bool],
) -> bool:
    """
    Обобщённый компаратор модулей.

    Предикат применяется сначала к длинам; только при равных длинах
    выполняется проход от старшего limb к младшему до первого различия,
    и предикат применяется к этой паре limbs.

    Args:
        left: Левый модуль (нормализованный)
        right: Правый модуль (нормализованный)
        predicate: Строгий предикат порядка (operator.lt или operator.gt)

    Returns:
        predicate(|left|, |right|)

    Examples:
        >>> import operator
        >>> compare_magnitudes([1, 2], [9], operator.gt)
        True
        >>> compare_magnitudes([5], [5], operator.lt)
        False
    """
    if len(left) != len(right):
        return predicate(len(left), len(right))

    i = len(left) - 1
    while i > 0 and left[i] == right[i]:
        i -= 1
    return predicate(left[i], right[i])


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(left: Sequence[int], right: Sequence[int]) -> Limbs:
    """
    |left| + |right| с распространением переноса.

    Размер результата max(sizes) + 1 до нормализации.
    """
    size = max(len(left), len(right)) + 1
    result = [0] * size
    carry = 0
    for i in range(size - 1):
        total = carry
        if i < len(left):
            total += left[i]
        if i < len(right):
            total += right[i]
        carry, result[i] = divmod(total, LIMB_BASE)
    result[size - 1] = carry
    return trim_inplace(result)


def subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> Limbs:
    """
    |larger| - |smaller| с распространением заёма.

    Требует |larger| >= |smaller| (вызывающий проверяет через
    compare_magnitudes).

    Raises:
        ValueError: если |larger| < |smaller|
    """
    result = list(larger)
    borrow = 0
    for i in range(len(result)):
        value = result[i] - borrow
        if i < len(smaller):
            value -= smaller[i]
        if value < 0:
            value += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = value

    if borrow or len(smaller) > len(larger):
        raise ValueError("subtract_magnitudes requires |larger| >= |smaller|")
    return trim_inplace(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(left: Sequence[int], right: Sequence[int]) -> Limbs:
    """
    Schoolbook свёртка |left| * |right|.

    Для каждой пары (i, j) произведение накапливается в result[i + j],
    перенос распространяется сразу после накопления, так что ни одна
    ячейка не уходит далеко за LIMB_BASE.
    """
    result = [0] * (len(left) + len(right) + 1)
    for i, right_limb in enumerate(right):
        if right_limb == 0:
            continue
        for j, left_limb in enumerate(left):
            result[i + j] += left_limb * right_limb
            result[i + j + 1] += result[i + j] // LIMB_BASE
            result[i + j] %= LIMB_BASE

    # Хвостовые ячейки могли накопить перенос >= LIMB_BASE
    carry = 0
    for k in range(len(result)):
        carry, result[k] = divmod(result[k] + carry, LIMB_BASE)
    return trim_inplace(result)


# =============================================================================
# ДЕЛЕНИЕ НА МАЛОЕ ЧИСЛО
# =============================================================================


def divide_by_small(limbs: Sequence[int], divisor: int) -> tuple[Limbs, int]:
    """
    |limbs| // divisor и остаток, проход от старшего limb.

    Args:
        limbs: Модуль делимого
        divisor: Делитель в диапазоне [1, LIMB_BASE)

    Returns:
        (частное, остаток)

    Raises:
        ValueError: если divisor вне [1, LIMB_BASE)

    Examples:
        >>> divide_by_small([1, 1], 2)  # 10001 / 2
        ([5000], 1)
    """
    if not 0 < divisor < LIMB_BASE:
        raise ValueError(f"divisor must be in [1, {LIMB_BASE}), got {divisor}")

    quotient = [0] * len(limbs)
    remainder = 0
    for i in range(len(limbs) - 1, -1, -1):
        current = remainder * LIMB_BASE + limbs[i]
        quotient[i], remainder = divmod(current, divisor)
    return trim_inplace(quotient), remainder


# =============================================================================
# ИНКРЕМЕНТ / ДЕКРЕМЕНТ МОДУЛЯ
# =============================================================================


def increment_magnitude_inplace(limbs: Limbs) -> Limbs:
    """|limbs| + 1 на месте, перенос через limbs со значением LIMB_BASE - 1."""
    i = 0
    while True:
        if i == len(limbs):
            limbs.append(1)
            break
        limbs[i] += 1
        if limbs[i] < LIMB_BASE:
            break
        limbs[i] = 0
        i += 1
    return limbs


def decrement_magnitude_inplace(limbs: Limbs) -> Limbs:
    """
    |limbs| - 1 на месте, заём через нулевые limbs.

    Raises:
        ValueError: для нулевого модуля (заём ушёл бы ниже нуля)
    """
    if is_zero_magnitude(limbs):
        raise ValueError("cannot decrement a zero magnitude")

    i = 0
    while limbs[i] == 0:
        limbs[i] = LIMB_BASE - 1
        i += 1
    limbs[i] -= 1
    return trim_inplace(limbs)
