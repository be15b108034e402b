"""Rich rendering for the calculator — screen, history panel, keypad, info.

Reads session state only; nothing here changes it.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tallyup.models import ERROR, HISTORY_LIMIT, Command, Operator, Token
from tallyup.session import CalculatorSession

# Button layout, top row first
KEYPAD: list[list[str]] = [
    ["C", "CE", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "−"],
    ["1", "2", "3", "+"],
    ["0", ".", "⌫", "="],
]

_OPERATOR_KEYS = {o.value for o in Operator}

INFO_TEXT = """\
[bold]tallyup[/bold] is a four-function calculator with a running total.

Operators resolve left to right as you press them: 2 + 3 × 4 = 20.

[bold]Keys[/bold]
  0-9 . ,          digits and decimal point
  + - * x /        operators
  = Enter          equals
  Backspace Delete drop the last digit
  Escape c         clear all
  %                divide the display by 100

[bold]Features:[/bold] keyboard input, calculation history of the last {limit}
results, recovery from Error by typing a new number.
"""


def render_screen(
    session: CalculatorSession,
    console: Console,
    show_history: bool = False,
) -> None:
    """Render the display panel, and optionally the history under it."""
    display_style = "bold red" if session.display == ERROR else "bold"
    body = Group(
        Text(session.pending or " ", style="dim", justify="right"),
        Text(session.display, style=display_style, justify="right"),
    )
    console.print(Panel(body, title="tallyup", width=32))
    if show_history:
        render_history(session.history, console)


def render_history(history: Sequence[str], console: Console) -> None:
    """Render calculation history, most recent first."""
    if not history:
        console.print("[dim]Start calculating to see your history here.[/dim]")
        return

    table = Table(title="Calculation History", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Calculation", min_width=20)

    for i, entry in enumerate(history, 1):
        style = "red" if entry.endswith(f"= {ERROR}") else None
        table.add_row(str(i), entry, style=style)

    console.print(table)


def _button_style(label: str, highlight: Optional[Token]) -> str:
    if highlight is not None and label == highlight:
        return "reverse bold"
    if label in _OPERATOR_KEYS:
        return "blue"
    if label == Command.EQUALS.value:
        return "green"
    return "white"


def render_keypad(console: Console, highlight: Optional[Token] = None) -> None:
    """Render the button grid. highlight marks the last pressed button."""
    table = Table(show_header=False, show_lines=True, padding=(0, 2))
    for _ in KEYPAD[0]:
        table.add_column(justify="center", min_width=3)

    for row in KEYPAD:
        cells = [f"[{_button_style(label, highlight)}]{label}[/]" for label in row]
        table.add_row(*cells)

    console.print(table)


def render_info(console: Console) -> None:
    """Render the about/usage text."""
    console.print(Panel(INFO_TEXT.format(limit=HISTORY_LIMIT).rstrip(), title="About"))
