"""Stream-style reading and writing of BigInteger values."""

from limbint.io.streams import (
    iter_big_integers,
    read_big_integer,
    read_token,
    write_big_integer,
)

__all__ = [
    "iter_big_integers",
    "read_big_integer",
    "read_token",
    "write_big_integer",
]
