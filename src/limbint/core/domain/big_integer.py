"""
BigInteger — знаковое целое фиксированной capacity в базе 10000

Sign-magnitude представление:
- sign: True для отрицательных, ноль всегда без знака
- limbs: модуль, младший limb первым, каждый limb в [0, 10000)
- capacity: максимум limbs; превышение → BigIntegerOverflow, без роста

Все compound-операторы (+=, -=, *=, /=, %=) мутируют self на месте.
Бинарные операторы (+, -, *, /, %) копируют левый операнд, применяют
compound-оператор к копии и возвращают её; операнды не мутируются.

Деление усекает к нулю: -7 / 2 == -3, -7 % 2 == -1 (остаток
выводится как a - (a / b) * b и несёт знак делимого).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size >= 1, старший limb != 0 (кроме нуля)
2. Нет отрицательного нуля
3. size <= capacity после каждой операции
4. Sign-case ветвление — явный match по (self.sign, other.sign)
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Dict, Optional, Union

from limbint.core.contracts.validators import validate_big_integer_state
from limbint.core.domain.state import BigIntegerConfig, BigIntegerState
from limbint.core.errors import BigIntegerDivisionByZero
from limbint.core.math.decimal_codec import format_decimal, parse_decimal
from limbint.core.math.division import divide_magnitudes
from limbint.core.math.limbs import (
    DEFAULT_CAPACITY,
    Limbs,
    add_magnitudes,
    compare_magnitudes,
    decrement_magnitude_inplace,
    divide_by_small,
    ensure_capacity,
    increment_magnitude_inplace,
    is_unit_magnitude,
    is_zero_magnitude,
    limbs_from_int,
    limbs_to_int,
    multiply_magnitudes,
    subtract_magnitudes,
)

logger = logging.getLogger(__name__)

Operand = Union["BigInteger", int]


class BigInteger:
    """
    Знаковое целое произвольной точности с фиксированной capacity.

    Args:
        value: int, десятичный текст или другой BigInteger (копия)
        capacity: Максимум limbs. По умолчанию capacity копируемого
            BigInteger или DEFAULT_CAPACITY

    Raises:
        BigIntegerOverflow: если value не помещается в capacity
        ValueError: если текст не является десятичным целым
        TypeError: для неподдерживаемого типа value

    Examples:
        >>> str(BigInteger("9999") + 1)
        '10000'
        >>> str(BigInteger(-7) / 2)
        '-3'
    """

    __slots__ = ("sign", "_limbs", "_capacity")

    def __init__(
        self,
        value: Union["BigInteger", int, str] = 0,
        capacity: Optional[int] = None,
    ):
        if capacity is not None:
            capacity = BigIntegerConfig(capacity=capacity).capacity
        elif isinstance(value, BigInteger):
            capacity = value._capacity
        else:
            capacity = DEFAULT_CAPACITY

        if isinstance(value, BigInteger):
            sign, limbs = value.sign, list(value._limbs)
        elif isinstance(value, bool):
            raise TypeError("BigInteger does not accept bool values")
        elif isinstance(value, int):
            sign, limbs = value < 0, limbs_from_int(value)
        elif isinstance(value, str):
            sign, limbs = parse_decimal(value)
        else:
            raise TypeError(
                f"BigInteger expects int, str or BigInteger, got {type(value).__name__}"
            )

        ensure_capacity(len(limbs), capacity, "construction")
        self.sign: bool = sign and not is_zero_magnitude(limbs)
        self._limbs: Limbs = limbs
        self._capacity: int = capacity

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _from_parts(cls, sign: bool, limbs: Limbs, capacity: int) -> "BigInteger":
        """Сборка из уже нормализованных частей, без повторной валидации."""
        result = cls.__new__(cls)
        result.sign = sign and not is_zero_magnitude(limbs)
        result._limbs = limbs
        result._capacity = capacity
        return result

    @classmethod
    def from_string(cls, text: str, capacity: Optional[int] = None) -> "BigInteger":
        """Разбор десятичного токена (см. decimal_codec.parse_decimal)."""
        return cls(text, capacity=capacity)

    @classmethod
    def from_state(cls, state: BigIntegerState) -> "BigInteger":
        """Восстановление значения из провалидированного snapshot."""
        return cls._from_parts(state.sign, list(state.limbs), state.capacity)

    def to_state(self) -> BigIntegerState:
        return BigIntegerState(
            sign=self.sign, limbs=list(self._limbs), capacity=self._capacity
        )

    def to_json(self) -> Dict[str, Any]:
        """
        Сериализация в dict по контракту big_integer_state.

        Результат содержит sign, limbs, capacity и decimal и проходит
        validate_big_integer_state.
        """
        data = self.to_state().model_dump()
        data["decimal"] = str(self)
        validate_big_integer_state(data)
        return data

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "BigInteger":
        """
        Восстановление из dict, провалидированного по контракту.

        Raises:
            jsonschema.ValidationError: если data нарушает контракт
                (включая каноническую форму и согласованность decimal)
        """
        validate_big_integer_state(data)
        state = BigIntegerState(
            sign=data["sign"], limbs=data["limbs"], capacity=data["capacity"]
        )
        return cls.from_state(state)

    def copy(self) -> "BigInteger":
        return BigInteger._from_parts(self.sign, list(self._limbs), self._capacity)

    __copy__ = copy

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def size(self) -> int:
        """Число значимых limbs."""
        return len(self._limbs)

    @property
    def limbs(self) -> tuple[int, ...]:
        """Limbs модуля (младший первым), read-only копия."""
        return tuple(self._limbs)

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_negative(self) -> bool:
        return self.sign

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._limbs)

    def swap(self, other: "BigInteger") -> None:
        """Обмен sign, limbs и capacity двух значений на месте."""
        self.sign, other.sign = other.sign, self.sign
        self._limbs, other._limbs = other._limbs, self._limbs
        self._capacity, other._capacity = other._capacity, self._capacity

    # =========================================================================
    # ВНУТРЕННИЕ ПОМОЩНИКИ
    # =========================================================================

    def _coerce(self, other: object, checked: bool = True):
        """
        Приведение операнда к BigInteger с capacity self.

        Returns:
            BigInteger или NotImplemented для неподдерживаемых типов
        """
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            limbs = limbs_from_int(other)
            if checked:
                ensure_capacity(len(limbs), self._capacity, "operand conversion")
            return BigInteger._from_parts(other < 0, limbs, self._capacity)
        return NotImplemented

    def _assign(self, sign: bool, limbs: Limbs, operation: str) -> "BigInteger":
        ensure_capacity(len(limbs), self._capacity, operation)
        self._limbs = limbs
        self.sign = sign and not is_zero_magnitude(limbs)
        return self

    def _accumulate(self, other_sign: bool, other_limbs: Limbs, operation: str) -> "BigInteger":
        """
        self += (other_sign, other_limbs): четыре sign-case.

        Вычитание приходит сюда с инвертированным other_sign.
        """
        match (self.sign, other_sign):
            case (False, False) | (True, True):
                # Одинаковые знаки: модули складываются, знак сохраняется
                return self._assign(
                    self.sign, add_magnitudes(self._limbs, other_limbs), operation
                )
            case (False, True) | (True, False):
                # Разные знаки: из большего модуля вычитается меньший,
                # знак берётся у операнда с большим модулем
                if compare_magnitudes(self._limbs, other_limbs, operator.lt):
                    return self._assign(
                        other_sign,
                        subtract_magnitudes(other_limbs, self._limbs),
                        operation,
                    )
                return self._assign(
                    self.sign, subtract_magnitudes(self._limbs, other_limbs), operation
                )

    # =========================================================================
    # COMPOUND ОПЕРАТОРЫ (+=, -=, *=, /=, %=)
    # =========================================================================

    def __iadd__(self, other: Operand) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._accumulate(other.sign, other._limbs, "addition")

    def __isub__(self, other: Operand) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._accumulate(not other.sign, other._limbs, "subtraction")

    def __imul__(self, other: Operand) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        limbs = multiply_magnitudes(self._limbs, other._limbs)
        return self._assign(self.sign ^ other.sign, limbs, "multiplication")

    def __itruediv__(self, other: Operand) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        quotient = divide_magnitudes(self._limbs, other._limbs)
        match (self.sign, other.sign):
            case (False, False) | (True, True):
                sign = False
            case (False, True) | (True, False):
                sign = True
        return self._assign(sign, quotient, "division")

    def __imod__(self, other: Operand) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other.is_zero():
            logger.debug("modulo by zero, dividend size=%d", self.size)
            raise BigIntegerDivisionByZero("modulo")

        product = self.copy()
        product /= other
        product *= other
        self -= product
        return self

    def divide_by(self, divisor: int) -> int:
        """
        Деление модуля на малое положительное число на месте.

        Знак сохраняется (кроме нулевого результата).

        Args:
            divisor: Делитель в [1, LIMB_BASE)

        Returns:
            Остаток от деления модуля

        Raises:
            BigIntegerDivisionByZero: если divisor == 0
            ValueError: если divisor вне [1, LIMB_BASE)
        """
        if divisor == 0:
            raise BigIntegerDivisionByZero("divide_by")
        quotient, remainder = divide_by_small(self._limbs, divisor)
        self._assign(self.sign, quotient, "divide_by")
        return remainder

    # =========================================================================
    # БИНАРНЫЕ ОПЕРАТОРЫ (+, -, *, /, %)
    # =========================================================================

    def __add__(self, other: Operand) -> "BigInteger":
        return self.copy().__iadd__(other)

    def __sub__(self, other: Operand) -> "BigInteger":
        return self.copy().__isub__(other)

    def __mul__(self, other: Operand) -> "BigInteger":
        return self.copy().__imul__(other)

    def __truediv__(self, other: Operand) -> "BigInteger":
        return self.copy().__itruediv__(other)

    def __mod__(self, other: Operand) -> "BigInteger":
        return self.copy().__imod__(other)

    def __divmod__(self, other: Operand) -> tuple["BigInteger", "BigInteger"]:
        quotient = self / other
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self - quotient * other

    # int слева: int + BigInteger и т.д.

    def __radd__(self, other: int) -> "BigInteger":
        left = self._coerce(other)
        if left is NotImplemented:
            return NotImplemented
        return left.__iadd__(self)

    def __rsub__(self, other: int) -> "BigInteger":
        left = self._coerce(other)
        if left is NotImplemented:
            return NotImplemented
        return left.__isub__(self)

    def __rmul__(self, other: int) -> "BigInteger":
        left = self._coerce(other)
        if left is NotImplemented:
            return NotImplemented
        return left.__imul__(self)

    def __rtruediv__(self, other: int) -> "BigInteger":
        left = self._coerce(other)
        if left is NotImplemented:
            return NotImplemented
        return left.__itruediv__(self)

    def __rmod__(self, other: int) -> "BigInteger":
        left = self._coerce(other)
        if left is NotImplemented:
            return NotImplemented
        return left.__imod__(self)

    def __rdivmod__(self, other: int) -> tuple["BigInteger", "BigInteger"]:
        left = self._coerce(other)
        if left is NotImplemented:
            return NotImplemented
        return left.__divmod__(self)

    # =========================================================================
    # УНАРНЫЕ
    # =========================================================================

    def __neg__(self) -> "BigInteger":
        return BigInteger._from_parts(not self.sign, list(self._limbs), self._capacity)

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __abs__(self) -> "BigInteger":
        return BigInteger._from_parts(False, list(self._limbs), self._capacity)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        magnitude = limbs_to_int(self._limbs)
        return -magnitude if self.sign else magnitude

    # =========================================================================
    # ИНКРЕМЕНТ / ДЕКРЕМЕНТ
    # =========================================================================

    def increment(self) -> "BigInteger":
        """
        ++x на месте.

        -1 → 0 обрабатывается до общего случая; для отрицательных модуль
        уменьшается, для неотрицательных увеличивается с переносом.
        """
        if self.sign and is_unit_magnitude(self._limbs):
            self._limbs = [0]
            self.sign = False
        elif self.sign:
            decrement_magnitude_inplace(self._limbs)
        else:
            limbs = increment_magnitude_inplace(list(self._limbs))
            self._assign(False, limbs, "increment")
        return self

    def decrement(self) -> "BigInteger":
        """
        --x на месте.

        0 → -1 обрабатывается до общего случая (без заёма ниже нуля).
        """
        if is_zero_magnitude(self._limbs):
            self._limbs = [1]
            self.sign = True
        elif self.sign:
            limbs = increment_magnitude_inplace(list(self._limbs))
            self._assign(True, limbs, "decrement")
        else:
            decrement_magnitude_inplace(self._limbs)
        return self

    def post_increment(self) -> "BigInteger":
        """x++: инкремент на месте, возвращает предыдущее значение."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """x--: декремент на месте, возвращает предыдущее значение."""
        previous = self.copy()
        self.decrement()
        return previous

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def _less(self, other: "BigInteger") -> bool:
        match (self.sign, other.sign):
            case (True, False):
                return True
            case (False, True):
                return False
            case (False, False):
                return compare_magnitudes(self._limbs, other._limbs, operator.lt)
            case (True, True):
                # Оба отрицательные: больший модуль — меньшее значение
                return compare_magnitudes(self._limbs, other._limbs, operator.gt)

    def _greater(self, other: "BigInteger") -> bool:
        match (self.sign, other.sign):
            case (False, True):
                return True
            case (True, False):
                return False
            case (False, False):
                return compare_magnitudes(self._limbs, other._limbs, operator.gt)
            case (True, True):
                return compare_magnitudes(self._limbs, other._limbs, operator.lt)

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other, checked=False)
        if other is NotImplemented:
            return NotImplemented
        return (
            not (self._less(other) or self._greater(other))
            and self.sign == other.sign
        )

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __lt__(self, other: Operand) -> bool:
        other = self._coerce(other, checked=False)
        if other is NotImplemented:
            return NotImplemented
        return self._less(other)

    def __gt__(self, other: Operand) -> bool:
        other = self._coerce(other, checked=False)
        if other is NotImplemented:
            return NotImplemented
        return self._greater(other)

    def __le__(self, other: Operand) -> bool:
        other = self._coerce(other, checked=False)
        if other is NotImplemented:
            return NotImplemented
        return not self._greater(other)

    def __ge__(self, other: Operand) -> bool:
        other = self._coerce(other, checked=False)
        if other is NotImplemented:
            return NotImplemented
        return not self._less(other)

    # Mutable value: не hashable
    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # ТЕКСТ
    # =========================================================================

    def __str__(self) -> str:
        return format_decimal(self.sign, self._limbs)

    def __repr__(self) -> str:
        return f"BigInteger('{self}', capacity={self._capacity})"


__all__ = ["BigInteger", "Operand"]
