"""Tests for CalculatorSession and the Rich renderers."""

import pytest
from rich.console import Console

from tallyup.models import CalculatorState, Operator
from tallyup.render import render_history, render_info, render_keypad, render_screen
from tallyup.session import CalculatorSession


@pytest.fixture
def session():
    return CalculatorSession()


@pytest.fixture
def console():
    return Console(record=True, width=80)


# --- Session (7 tests) ---

def test_starts_cleared(session):
    assert session.state == CalculatorState()
    assert session.display == "0"
    assert session.history == ()
    assert session.pending == ""


def test_press_maps_and_submits(session):
    for key in "12*3":
        assert session.press(key) is True
    session.press("Enter")
    assert session.display == "36"
    assert session.history == ("12 × 3 = 36",)


def test_ignored_keys_leave_state_alone(session):
    session.press("4")
    before = session.state
    assert session.press("q") is False
    assert session.press("c", ctrl=True) is False
    assert session.state is before


def test_pending_line(session):
    for token in ("5", "+"):
        session.submit(token)
    assert session.pending == "5 +"
    session.submit("2")
    session.submit("=")
    assert session.pending == ""


def test_pending_line_cleared_by_overlong_entry(session):
    for _ in range(400):
        session.submit("9")
    session.submit("+")
    assert session.display == "Error"
    assert session.pending == ""


def test_last_token_is_normalized(session):
    session.submit("*")
    assert session.last_token == Operator.MULTIPLY


def test_submit_unknown_token_raises(session):
    with pytest.raises(ValueError):
        session.submit("^")
    assert session.display == "0"


# --- Rendering (5 tests) ---

def test_screen_shows_display_and_pending(session, console):
    for token in ("7", "×"):
        session.submit(token)
    render_screen(session, console)
    text = console.export_text()
    assert "7 ×" in text
    assert "tallyup" in text


def test_screen_with_history(session, console):
    for token in ("1", "+", "1", "="):
        session.submit(token)
    render_screen(session, console, show_history=True)
    text = console.export_text()
    assert "Calculation History" in text
    assert "1 + 1 = 2" in text


def test_empty_history_message(console):
    render_history((), console)
    assert "Start calculating to see your history here." in console.export_text()


def test_keypad_has_every_button(console):
    render_keypad(console, highlight="=")
    text = console.export_text()
    for label in ("C", "CE", "%", "÷", "×", "−", "+", "⌫", "=", "0", "9"):
        assert label in text


def test_info_mentions_history_limit(console):
    render_info(console)
    assert "last 10" in console.export_text()
