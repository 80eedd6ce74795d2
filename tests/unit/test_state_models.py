"""
Tests for Pydantic State Models

Покрывает:
- BigIntegerConfig: валидация capacity
- BigIntegerState: каноническая форма snapshot
- Immutability (frozen=True)
- BigInteger.to_state / from_state
"""

import pytest
from pydantic import ValidationError

from limbint import BigInteger, BigIntegerConfig, BigIntegerState, DEFAULT_CAPACITY


# =============================================================================
# CONFIG
# =============================================================================


class TestBigIntegerConfig:
    """Тесты для BigIntegerConfig"""

    def test_default_capacity(self) -> None:
        assert BigIntegerConfig().capacity == DEFAULT_CAPACITY

    def test_capacity_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BigIntegerConfig(capacity=0)
        with pytest.raises(ValidationError):
            BigIntegerConfig(capacity=-5)

    def test_capacity_upper_bound(self) -> None:
        with pytest.raises(ValidationError):
            BigIntegerConfig(capacity=10_000_000)

    def test_frozen(self) -> None:
        config = BigIntegerConfig(capacity=8)
        with pytest.raises(ValidationError):
            config.capacity = 9


# =============================================================================
# STATE
# =============================================================================


class TestBigIntegerState:
    """Тесты для BigIntegerState"""

    def test_valid(self) -> None:
        state = BigIntegerState(sign=True, limbs=[6789, 2345, 1], capacity=10)
        assert state.sign is True
        assert state.limbs == [6789, 2345, 1]

    def test_limb_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="outside"):
            BigIntegerState(limbs=[10000])
        with pytest.raises(ValidationError, match="outside"):
            BigIntegerState(limbs=[-1])

    def test_leading_zero_limb(self) -> None:
        with pytest.raises(ValidationError, match="leading"):
            BigIntegerState(limbs=[1, 0])

    def test_empty_limbs(self) -> None:
        with pytest.raises(ValidationError):
            BigIntegerState(limbs=[])

    def test_negative_zero(self) -> None:
        with pytest.raises(ValidationError, match="negative zero"):
            BigIntegerState(sign=True, limbs=[0])

    def test_exceeds_capacity(self) -> None:
        with pytest.raises(ValidationError, match="exceed capacity"):
            BigIntegerState(limbs=[1, 2, 3], capacity=2)

    def test_json_round_trip(self) -> None:
        state = BigIntegerState(sign=False, limbs=[0, 0, 1], capacity=4)
        restored = BigIntegerState.model_validate_json(state.model_dump_json())
        assert restored == state


# =============================================================================
# ИНТЕГРАЦИЯ С BigInteger
# =============================================================================


class TestBigIntegerSnapshot:
    """BigInteger.to_state / from_state"""

    def test_to_state(self) -> None:
        state = BigInteger("-123456789", capacity=5).to_state()
        assert state.sign is True
        assert state.limbs == [6789, 2345, 1]
        assert state.capacity == 5

    def test_from_state(self) -> None:
        state = BigIntegerState(sign=True, limbs=[0, 1], capacity=3)
        value = BigInteger.from_state(state)
        assert value == -10000
        assert value.capacity == 3

    def test_restored_value_is_independent(self) -> None:
        state = BigIntegerState(limbs=[5])
        value = BigInteger.from_state(state)
        value += 1
        assert state.limbs == [5]
