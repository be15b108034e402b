"""Calculator engine — applies one token to a CalculatorState.

Transition per token class:
1. Digit / decimal: edit the display, or start a fresh operand
2. C / CE / backspace: clear all, clear the display, drop one character
3. Percent: divide the display by 100 and reformat
4. Operator: store the operand, or resolve the pending operator first
   (chained computation, strictly left to right)
5. Equals: resolve the pending operator and clear it

Errors never raise: division by zero and non-finite results put the
ERROR sentinel on the display, and the next digit recovers from it.
"""

from __future__ import annotations

import math
import operator as _op
from dataclasses import replace
from typing import Iterable, Optional

from tallyup.formatter import format_number
from tallyup.models import (
    ERROR,
    HISTORY_LIMIT,
    CalculatorState,
    Command,
    Operator,
    Token,
    parse_token,
)


def _divide(a: float, b: float) -> float | str:
    if b == 0:
        return ERROR
    return a / b


_OPERATIONS = {
    Operator.ADD: _op.add,
    Operator.SUBTRACT: _op.sub,
    Operator.MULTIPLY: _op.mul,
    Operator.DIVIDE: _divide,
}


def _parse_display(display: str) -> float:
    """Numeric value of the display; NaN if it doesn't parse."""
    try:
        return float(display)
    except ValueError:
        return float("nan")


def _push_history(history: tuple[str, ...], entry: str) -> tuple[str, ...]:
    """Prepend entry, dropping the oldest entries beyond HISTORY_LIMIT."""
    return (entry,) + history[: HISTORY_LIMIT - 1]


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

def _input_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if state.is_error or state.waiting_for_operand:
        return replace(state, display=digit, waiting_for_operand=False)
    if state.display == "0":
        return replace(state, display=digit)
    return replace(state, display=state.display + digit)


def _input_decimal(state: CalculatorState) -> CalculatorState:
    if state.is_error or state.waiting_for_operand:
        return replace(state, display="0.", waiting_for_operand=False)
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------

def _clear(state: CalculatorState) -> CalculatorState:
    """All-clear. History survives."""
    return replace(
        state,
        display="0",
        previous_value=None,
        operator=None,
        waiting_for_operand=False,
    )


def _backspace(state: CalculatorState) -> CalculatorState:
    if state.is_error or len(state.display) <= 1:
        return replace(state, display="0")
    display = state.display[:-1]
    # "-5" → "-", "1.5e-7" → "1.5e-": not a number any more
    try:
        float(display)
    except ValueError:
        display = "0"
    return replace(state, display=display)


def _percent(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return state
    return replace(state, display=format_number(_parse_display(state.display) / 100))


# ---------------------------------------------------------------------------
# Computation
# ---------------------------------------------------------------------------

def _calculate(state: CalculatorState, next_operator: Optional[Operator]) -> CalculatorState:
    """Resolve or record an operand, then make next_operator pending.

    next_operator is None when finalizing with '='.
    """
    if state.is_error:
        return replace(state, operator=next_operator, waiting_for_operand=True)

    value = _parse_display(state.display)
    if not math.isfinite(value):
        # digit entry too long for a float, or an unparseable display
        return replace(
            state,
            display=ERROR,
            previous_value=None,
            operator=next_operator,
            waiting_for_operand=True,
        )

    if state.previous_value is None:
        state = replace(state, previous_value=value)
    elif state.operator:
        left = state.previous_value
        result = _OPERATIONS[state.operator](left, value)
        shown = format_number(result)
        entry = (
            f"{format_number(left)} {state.operator.value} "
            f"{format_number(value)} = {shown}"
        )
        state = replace(
            state,
            display=shown,
            previous_value=None if shown == ERROR else result,
            history=_push_history(state.history, entry),
        )

    return replace(state, operator=next_operator, waiting_for_operand=True)


def _equals(state: CalculatorState) -> CalculatorState:
    if state.operator is None or state.previous_value is None or state.is_error:
        return state
    state = _calculate(state, None)
    return replace(state, operator=None, previous_value=None, waiting_for_operand=True)


_COMMANDS = {
    Command.DECIMAL: _input_decimal,
    Command.CLEAR: _clear,
    Command.CLEAR_ENTRY: lambda state: replace(state, display="0"),
    Command.BACKSPACE: _backspace,
    Command.PERCENT: _percent,
    Command.EQUALS: _equals,
}


def apply(state: CalculatorState, token: Token) -> CalculatorState:
    """Apply one token and return the next state.

    Args:
        state: Current state; left untouched.
        token: A digit, Operator, Command, or their string spelling.

    Returns:
        The state after the token.

    Raises:
        ValueError: token is not part of the calculator vocabulary.
    """
    token = parse_token(token)
    if isinstance(token, Operator):
        return _calculate(state, token)
    if isinstance(token, Command):
        return _COMMANDS[token](state)
    return _input_digit(state, token)


def apply_all(state: CalculatorState, tokens: Iterable[Token]) -> CalculatorState:
    """Fold a sequence of tokens through apply()."""
    for token in tokens:
        state = apply(state, token)
    return state
