"""Key-press → token mapping for keyboard input.

Translates physical key identifiers (single characters or named keys such
as "Enter") into calculator tokens. Self-contained; the engine never sees
raw keys.
"""

from __future__ import annotations

from typing import Iterable, Optional

from tallyup.models import DIGITS, Command, Operator, Token

_KEY_MAP: dict[str, Token] = {
    **{d: d for d in DIGITS},
    ".": Command.DECIMAL,
    ",": Command.DECIMAL,
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "X": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "÷": Operator.DIVIDE,
    "=": Command.EQUALS,
    "Enter": Command.EQUALS,
    "Backspace": Command.BACKSPACE,
    "Delete": Command.BACKSPACE,
    "Escape": Command.CLEAR,
    "c": Command.CLEAR,
    "C": Command.CLEAR,
    "%": Command.PERCENT,
}

NAMED_KEYS = tuple(k for k in _KEY_MAP if len(k) > 1)


def map_key(
    key: str,
    *,
    ctrl: bool = False,
    alt: bool = False,
    meta: bool = False,
) -> Optional[Token]:
    """Map a key press to a calculator token.

    Chorded presses (ctrl/alt/meta held) belong to the terminal or OS and
    are never mapped.

    Returns:
        The token, or None if the key should be ignored.
    """
    if ctrl or alt or meta:
        return None
    return _KEY_MAP.get(key)


def split_keys(args: Iterable[str]) -> list[str]:
    """Split command-line arguments into key identifiers.

    Named keys ("Enter", "Escape", ...) stay whole; anything else is read
    one character per key, so "12+3" is four presses.
    """
    keys: list[str] = []
    for arg in args:
        if arg in NAMED_KEYS:
            keys.append(arg)
        else:
            keys.extend(arg)
    return keys
