"""
Decimal Codec — десятичный текст <-> limbs

Формат ввода: необязательный знак '+' / '-', затем одна или более ASCII
цифр. Разделители, пробелы внутри числа и экспонента не допускаются.

Группировка: строка цифр режется на группы по LIMB_DIGITS начиная с
младшего конца, так что левая группа содержит от 1 до 4 цифр.

Формат вывода: знак только для отрицательных, старший limb без
дополнения, остальные limbs дополнены нулями до 4 цифр.
"""

import logging
import re
from typing import Final, Sequence

from limbint.core.math.limbs import (
    LIMB_DIGITS,
    Limbs,
    is_zero_magnitude,
    trim_inplace,
)

logger = logging.getLogger(__name__)

DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def parse_decimal(text: str) -> tuple[bool, Limbs]:
    """
    Разбор десятичного текста в (sign, limbs).

    Ведущие нули допускаются и отбрасываются нормализацией;
    "-0" даёт ноль без знака.

    Args:
        text: Изолированный токен (без окружающих пробелов)

    Returns:
        (sign, limbs), sign=True для отрицательных

    Raises:
        ValueError: если text не является десятичным целым

    Examples:
        >>> parse_decimal("-1234567")
        (True, [4567, 123])
        >>> parse_decimal("+0009999")
        (False, [9999])
    """
    if not DECIMAL_PATTERN.fullmatch(text):
        logger.debug("rejected decimal token %r", text)
        raise ValueError(f"invalid decimal integer literal: {text!r}")

    sign = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text

    limbs: Limbs = []
    for end in range(len(digits), 0, -LIMB_DIGITS):
        start = max(0, end - LIMB_DIGITS)
        limbs.append(int(digits[start:end]))
    trim_inplace(limbs)

    if is_zero_magnitude(limbs):
        sign = False
    return sign, limbs


def format_decimal(sign: bool, limbs: Sequence[int]) -> str:
    """
    Форматирование (sign, limbs) в десятичный текст.

    Examples:
        >>> format_decimal(True, [7, 0, 12])
        '-1200000007'
        >>> format_decimal(False, [0])
        '0'
    """
    parts = ["-"] if sign else []
    parts.append(str(limbs[-1]))
    parts.extend(f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(limbs[:-1]))
    return "".join(parts)
