"""Data models for the tallyup calculator.

Operator and Command enums, the digit set, and CalculatorState: the typed
structures that flow through keymap → engine → session → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

ERROR = "Error"
HISTORY_LIMIT = 10


class Operator(str, Enum):
    """Binary operators."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"


class Command(str, Enum):
    """Non-digit, non-operator keys."""

    DECIMAL = "."
    CLEAR = "C"
    CLEAR_ENTRY = "CE"
    BACKSPACE = "⌫"
    PERCENT = "%"
    EQUALS = "="


DIGITS = tuple("0123456789")

Token = Union[str, Operator, Command]

# ASCII spellings accepted for operators that are hard to type
_ALIASES = {
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
}


def parse_token(text: Token) -> Token:
    """Normalize a token into the calculator vocabulary.

    Digits come back as plain one-character strings, everything else as an
    Operator or Command member.

    Raises:
        ValueError: text is not a calculator token.
    """
    if isinstance(text, (Operator, Command)):
        return text
    if text in DIGITS:
        return text
    if text in _ALIASES:
        return _ALIASES[text]
    try:
        return Operator(text)
    except ValueError:
        pass
    try:
        return Command(text)
    except ValueError:
        raise ValueError(f"Unknown calculator token: {text!r}") from None


@dataclass(frozen=True)
class CalculatorState:
    """Snapshot of the calculator between two key presses.

    Never mutated: the engine returns a new instance for every token.
    """

    display: str = "0"
    previous_value: Optional[float] = None
    operator: Optional[Operator] = None
    waiting_for_operand: bool = False

    # Most recent first, at most HISTORY_LIMIT entries
    history: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.display == ERROR

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "display": self.display,
            "previous_value": self.previous_value,
            "operator": self.operator.value if self.operator else None,
            "waiting_for_operand": self.waiting_for_operand,
            "history": list(self.history),
        }
