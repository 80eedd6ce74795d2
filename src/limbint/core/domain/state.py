"""
BigInteger State — конфигурация и snapshot модели

Immutable Pydantic модели:
- BigIntegerConfig: валидация пользовательской capacity
- BigIntegerState: сериализуемый snapshot значения (sign, limbs, capacity)

Snapshot соответствует JSON Schema контракту big_integer_state.json.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from limbint.core.math.limbs import DEFAULT_CAPACITY, LIMB_BASE, MAX_CAPACITY


# =============================================================================
# CONFIG
# =============================================================================


class BigIntegerConfig(BaseModel):
    """
    Конфигурация BigInteger.

    Capacity задаётся в limbs (по 4 десятичные цифры на limb).
    """

    capacity: int = Field(
        DEFAULT_CAPACITY,
        gt=0,
        le=MAX_CAPACITY,
        description="Максимальное число limbs значения",
    )

    model_config = {"frozen": True}  # Immutable


# =============================================================================
# STATE SNAPSHOT
# =============================================================================


class BigIntegerState(BaseModel):
    """
    Snapshot значения BigInteger.

    Каноническая форма:
    - каждый limb в [0, LIMB_BASE)
    - нет старших нулевых limbs (кроме единственного нуля)
    - нет отрицательного нуля
    - len(limbs) <= capacity
    """

    sign: bool = Field(False, description="True для отрицательных значений")
    limbs: list[int] = Field(
        ..., min_length=1, description="Limbs модуля, младший первым"
    )
    capacity: int = Field(
        DEFAULT_CAPACITY, gt=0, le=MAX_CAPACITY, description="Capacity в limbs"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("limbs")
    @classmethod
    def validate_limbs(cls, v: list[int]) -> list[int]:
        """Проверка диапазона limbs и отсутствия старших нулей."""
        for index, limb in enumerate(v):
            if not 0 <= limb < LIMB_BASE:
                raise ValueError(
                    f"limb {index} = {limb} outside [0, {LIMB_BASE})"
                )
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("limbs must not carry leading (most-significant) zeros")
        return v

    @model_validator(mode="after")
    def validate_canonical(self) -> "BigIntegerState":
        """Проверка отсутствия -0 и соответствия capacity."""
        if self.sign and self.limbs == [0]:
            raise ValueError("negative zero is not a canonical value")
        if len(self.limbs) > self.capacity:
            raise ValueError(
                f"{len(self.limbs)} limbs exceed capacity {self.capacity}"
            )
        return self
