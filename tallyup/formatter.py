"""Result formatting for the calculator display.

Turns computed values into display text: the error sentinel for anything
non-finite or unparseable, exponential notation for very large and very
small magnitudes, and a plain decimal otherwise.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from tallyup.models import ERROR

EXP_UPPER = 1e12
EXP_LOWER = 1e-6
EXP_DIGITS = 6
MAX_PLAIN_LENGTH = 12
ROUND_DIGITS = 8

_ERROR_TEXT = (ERROR, "Infinity", "-Infinity")


def _plain(num: float) -> str:
    """Shortest decimal text for num, without exponent or trailing '.0'."""
    if num == 0:
        return "0"
    # repr() gives the shortest round-tripping digits; Decimal drops the exponent
    text = format(Decimal(repr(num)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _exponential(num: float) -> str:
    """Exponential text with EXP_DIGITS fraction digits: 1.000000e-7."""
    mantissa, exponent = f"{num:.{EXP_DIGITS}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def format_number(value: Union[float, int, str]) -> str:
    """Format a computed value for the display.

    Args:
        value: A number, a numeric string, or the error sentinel.

    Returns:
        Display text, or ERROR for sentinel, infinite, NaN, or unparseable input.
    """
    if isinstance(value, str):
        if value in _ERROR_TEXT:
            return ERROR
        try:
            num = float(value)
        except ValueError:
            return ERROR
    else:
        num = float(value)

    if not math.isfinite(num):
        return ERROR

    magnitude = abs(num)
    if magnitude >= EXP_UPPER or (0 < magnitude < EXP_LOWER):
        return _exponential(num)

    text = _plain(num)
    if len(text) > MAX_PLAIN_LENGTH:
        return _plain(round(num, ROUND_DIGITS))
    return text
