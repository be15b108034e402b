"""CLI for the tallyup calculator.

Usage:
    python -m tallyup run 5 + 3 + 2 =          # Symbolic tokens
    python -m tallyup run 7 / 0 = --json       # Final state as JSON
    python -m tallyup keys 12*3 Enter          # Physical key presses
    python -m tallyup repl                     # Interactive session
    python -m tallyup keypad                   # Show the button layout
    python -m tallyup info                     # About / key reference
"""

from __future__ import annotations

import json

import typer
from rich.console import Console

from tallyup.keymap import split_keys
from tallyup.render import render_history, render_info, render_keypad, render_screen
from tallyup.session import CalculatorSession

app = typer.Typer(
    name="tallyup",
    help="Four-function calculator with chained operations",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

_HISTORY_ENVVAR = "TALLYUP_SHOW_HISTORY"
_QUIT_WORDS = ("quit", "exit", "q")


def _show(session: CalculatorSession, show_history: bool, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(session.state.to_dict(), ensure_ascii=False, indent=2))
    else:
        render_screen(session, console, show_history=show_history)


@app.command("run")
def cmd_run(
    tokens: list[str] = typer.Argument(help="Tokens: digits, '.', C, CE, ⌫, %, + − × ÷ (or - * /), ="),
    show_history: bool = typer.Option(False, "--history/--no-history", envvar=_HISTORY_ENVVAR, help="Show calculation history"),
    as_json: bool = typer.Option(False, "--json", help="Print the final state as JSON"),
) -> None:
    """Apply symbolic tokens from a cleared calculator."""
    session = CalculatorSession()
    for token in tokens:
        try:
            session.submit(token)
        except ValueError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
    _show(session, show_history, as_json)


@app.command("keys")
def cmd_keys(
    keys: list[str] = typer.Argument(help="Key presses, e.g. '12*3' Enter"),
    show_history: bool = typer.Option(False, "--history/--no-history", envvar=_HISTORY_ENVVAR, help="Show calculation history"),
    as_json: bool = typer.Option(False, "--json", help="Print the final state as JSON"),
    strict: bool = typer.Option(False, "--strict", help="Fail on keys that map to nothing"),
) -> None:
    """Press keys as if typed on a keyboard."""
    session = CalculatorSession()
    skipped: list[str] = []
    for key in split_keys(keys):
        if not session.press(key):
            skipped.append(key)

    if skipped:
        listed = " ".join(repr(k) for k in skipped)
        if strict:
            err_console.print(f"[red]Error:[/red] unmapped keys: {listed}")
            raise typer.Exit(1)
        err_console.print(f"[yellow]Ignored keys:[/yellow] {listed}")

    _show(session, show_history, as_json)


@app.command("repl")
def cmd_repl(
    show_history: bool = typer.Option(False, "--history/--no-history", envvar=_HISTORY_ENVVAR, help="Show calculation history"),
    show_keypad: bool = typer.Option(False, "--keypad", help="Show the keypad with the last pressed button"),
) -> None:
    """Interactive session. Each line is read as key presses."""
    session = CalculatorSession()
    console.print("[dim]Type keys and press return. 'history' toggles history, 'quit' exits.[/dim]")
    render_screen(session, console, show_history=show_history)

    while True:
        try:
            line = console.input("[bold]>[/bold] ")
        except (EOFError, KeyboardInterrupt):
            break

        words = line.split()
        if not words:
            continue
        if words[0].lower() in _QUIT_WORDS:
            break
        if words[0].lower() == "history":
            show_history = not show_history
        else:
            for key in split_keys(words):
                if not session.press(key):
                    err_console.print(f"[yellow]Ignored key:[/yellow] {key!r}")

        render_screen(session, console, show_history=show_history)
        if show_keypad:
            render_keypad(console, highlight=session.last_token)

    if session.history and not show_history:
        render_history(session.history, console)


@app.command("keypad")
def cmd_keypad() -> None:
    """Show the button layout."""
    render_keypad(console)


@app.command("info")
def cmd_info() -> None:
    """Show usage and key reference."""
    render_info(console)


if __name__ == "__main__":
    app()
