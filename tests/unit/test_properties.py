"""
Property-based тесты BigInteger (hypothesis)

Инварианты проверяются против native int Python:
- (a + b) - b == a, (a - b) + b == a
- a == (a / b) * b + (a % b), |a % b| < |b|
- инкремент/декремент взаимно обратны
- ровно одно из a < b, a == b, a > b
- parse(format(a)) == a
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from limbint import BigInteger


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


# ~100 десятичных цифр, много значений на границах limbs
integers = st.one_of(
    st.integers(min_value=-(10 ** 100), max_value=10 ** 100),
    st.integers(min_value=-20001, max_value=20001),
    st.sampled_from([0, 1, -1, 9999, -9999, 10000, -10000, 10 ** 8 - 1, -(10 ** 8)]),
)
non_zero = integers.filter(lambda v: v != 0)


@given(integers, integers)
def test_addition_matches_native(a: int, b: int) -> None:
    assert int(BigInteger(a) + BigInteger(b)) == a + b


@given(integers, integers)
def test_additive_round_trip(a: int, b: int) -> None:
    x, y = BigInteger(a), BigInteger(b)
    assert (x + y) - y == x
    assert (x - y) + y == x


@given(integers, integers)
def test_multiplication_matches_native(a: int, b: int) -> None:
    assert int(BigInteger(a) * BigInteger(b)) == a * b


@settings(deadline=None)
@given(integers, non_zero)
def test_division_identity(a: int, b: int) -> None:
    x, y = BigInteger(a), BigInteger(b)
    quotient = x / y
    remainder = x % y
    assert x == quotient * y + remainder
    assert abs(remainder) < abs(y)
    assert (int(quotient), int(remainder)) == _truncated_divmod(a, b)


@given(integers)
def test_increment_decrement_inverse(a: int) -> None:
    value = BigInteger(a)
    value.increment().decrement()
    assert value == a
    value.decrement().increment()
    assert value == a
    assert int(BigInteger(a).increment()) == a + 1
    assert int(BigInteger(a).decrement()) == a - 1


@given(integers, integers)
def test_total_order(a: int, b: int) -> None:
    x, y = BigInteger(a), BigInteger(b)
    assert [x < y, x == y, x > y].count(True) == 1
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x >= y) == (a >= b)
    assert (x != y) == (a != b)


@given(integers)
def test_format_parse_round_trip(a: int) -> None:
    value = BigInteger(a)
    text = str(value)
    assert text == str(a)
    assert BigInteger(text) == value


@given(integers)
def test_canonical_form(a: int) -> None:
    value = BigInteger(a)
    limbs = value.limbs
    assert value.size >= 1
    assert all(0 <= limb < 10000 for limb in limbs)
    assert limbs[-1] != 0 or value.size == 1
    assert not (value.is_negative() and value.is_zero())
