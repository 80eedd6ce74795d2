"""
Streams — чтение и запись BigInteger через текстовые потоки

Токенизация как у оператора >> для потоков: пропуск пробельных символов,
затем чтение до следующего пробельного символа или конца потока.
Сам разбор токена выполняет BigInteger (decimal_codec).
"""

import logging
from typing import Iterator, Optional, TextIO

from limbint.core.domain.big_integer import BigInteger

logger = logging.getLogger(__name__)


def read_token(stream: TextIO) -> Optional[str]:
    """
    Чтение одного whitespace-delimited токена.

    Поток читается посимвольно, так что после токена поток остаётся
    на разделителе и следующий вызов продолжит с этого места.

    Returns:
        Токен или None, если поток исчерпан
    """
    chars: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    return "".join(chars) if chars else None


def read_big_integer(stream: TextIO, capacity: Optional[int] = None) -> BigInteger:
    """
    Чтение следующего BigInteger из потока.

    Raises:
        EOFError: если в потоке не осталось токенов
        ValueError: если токен не является десятичным целым
        BigIntegerOverflow: если значение не помещается в capacity
    """
    token = read_token(stream)
    if token is None:
        raise EOFError("no BigInteger token left in stream")
    return BigInteger(token, capacity=capacity)


def iter_big_integers(stream: TextIO, capacity: Optional[int] = None) -> Iterator[BigInteger]:
    """Итератор по всем оставшимся токенам потока."""
    count = 0
    while (token := read_token(stream)) is not None:
        count += 1
        yield BigInteger(token, capacity=capacity)
    logger.debug("read %d BigInteger tokens", count)


def write_big_integer(stream: TextIO, value: BigInteger, end: str = "") -> None:
    """Запись десятичного представления value (и end) в поток."""
    stream.write(str(value))
    if end:
        stream.write(end)
