"""One calculator session: owns the state and feeds it tokens and key presses."""

from __future__ import annotations

from typing import Optional

from tallyup.engine import apply
from tallyup.formatter import format_number
from tallyup.keymap import map_key
from tallyup.models import CalculatorState, Token, parse_token


class CalculatorSession:
    """Holds the current CalculatorState for a single user.

    The state is replaced, never mutated, on every token.
    """

    def __init__(self, state: Optional[CalculatorState] = None):
        self.state = state or CalculatorState()
        self.last_token: Optional[Token] = None

    def submit(self, token: Token) -> CalculatorState:
        """Apply one token. Raises ValueError for an unknown token."""
        self.state = apply(self.state, token)
        self.last_token = parse_token(token)
        return self.state

    def press(self, key: str, *, ctrl: bool = False, alt: bool = False, meta: bool = False) -> bool:
        """Map a key press and submit it.

        Returns:
            True if the key produced a token, False if it was ignored.
        """
        token = map_key(key, ctrl=ctrl, alt=alt, meta=meta)
        if token is None:
            return False
        self.submit(token)
        return True

    @property
    def display(self) -> str:
        return self.state.display

    @property
    def history(self) -> tuple[str, ...]:
        return self.state.history

    @property
    def pending(self) -> str:
        """Secondary display line: '<previous value> <operator>' or ''."""
        if self.state.operator and self.state.previous_value is not None:
            return f"{format_number(self.state.previous_value)} {self.state.operator.value}"
        return ""
