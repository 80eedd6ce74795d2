"""
Тесты для limbint.io.streams

Токенизация потока, чтение и запись BigInteger.
"""

import io

import pytest

from limbint import BigInteger, BigIntegerOverflow
from limbint.io import iter_big_integers, read_big_integer, read_token, write_big_integer


class TestReadToken:
    """Тесты для read_token"""

    def test_skips_leading_whitespace(self) -> None:
        assert read_token(io.StringIO("  \n\t 42 ")) == "42"

    def test_consumes_one_token_at_a_time(self) -> None:
        stream = io.StringIO("1 -2\n+3")
        assert read_token(stream) == "1"
        assert read_token(stream) == "-2"
        assert read_token(stream) == "+3"
        assert read_token(stream) is None

    def test_empty(self) -> None:
        assert read_token(io.StringIO("   ")) is None


class TestReadBigInteger:
    """Тесты для read_big_integer"""

    def test_reads_value(self) -> None:
        value = read_big_integer(io.StringIO(" -123456789012345678901234567890\n"))
        assert str(value) == "-123456789012345678901234567890"

    def test_eof(self) -> None:
        with pytest.raises(EOFError):
            read_big_integer(io.StringIO(""))

    def test_malformed(self) -> None:
        with pytest.raises(ValueError):
            read_big_integer(io.StringIO("12ab"))

    def test_capacity(self) -> None:
        with pytest.raises(BigIntegerOverflow):
            read_big_integer(io.StringIO("123456789"), capacity=2)


class TestIterBigIntegers:
    """Тесты для iter_big_integers"""

    def test_all_tokens(self) -> None:
        values = list(iter_big_integers(io.StringIO("1 22\n-333   4444\n")))
        assert [int(v) for v in values] == [1, 22, -333, 4444]


class TestWriteBigInteger:
    """Тесты для write_big_integer"""

    def test_writes_decimal(self) -> None:
        sink = io.StringIO()
        write_big_integer(sink, BigInteger("-100000001"))
        assert sink.getvalue() == "-100000001"

    def test_end(self) -> None:
        sink = io.StringIO()
        write_big_integer(sink, BigInteger(0), end="\n")
        assert sink.getvalue() == "0\n"

    def test_round_trip(self) -> None:
        sink = io.StringIO()
        for text in ("10000", "-9999", "0"):
            write_big_integer(sink, BigInteger(text), end=" ")
        values = list(iter_big_integers(io.StringIO(sink.getvalue())))
        assert [str(v) for v in values] == ["10000", "-9999", "0"]
