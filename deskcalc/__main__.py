"""CLI for the deskcalc calculator engine.

Usage:
    python -m deskcalc press 5 + 2 = = =          # Feed keys, print the display
    python -m deskcalc press "12÷0=" --trace      # Show engine state after each key
    python -m deskcalc press 5 + 2 = --json       # Display and state as JSON
    python -m deskcalc repl                       # Interactive keypad
    python -m deskcalc symbols                    # Accepted operator symbols
"""

from __future__ import annotations

import json
from typing import List

import typer
from rich.console import Console

from deskcalc.display import TraceStep, render_display, render_symbols, render_trace
from deskcalc.engine import Calculator
from deskcalc.environment import ConfigError, load_config
from deskcalc.keys import NAMED_KEYS, press, split_keys

app = typer.Typer(
    name="deskcalc",
    help="Four-function calculator engine with repeatable equals",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

_QUIT_WORDS = ("quit", "exit")


def _make_calculator() -> Calculator:
    """Build an engine from DESKCALC_* settings, exiting on bad config."""
    try:
        return Calculator(load_config())
    except ConfigError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)


def _key_names(calc: Calculator) -> set[str]:
    return set(NAMED_KEYS) | set(calc.symbols)


@app.command("press")
def cmd_press(
    keys: List[str] = typer.Argument(help="Keys to press, e.g. '5 + 2 =' or '12×3='"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show engine state after each key"),
    as_json: bool = typer.Option(False, "--json", help="Print display and engine state as JSON"),
) -> None:
    """Feed keys to a fresh calculator and print the final display."""
    calc = _make_calculator()
    names = _key_names(calc)

    steps: list[TraceStep] = []
    for key in split_keys(" ".join(keys), names):
        handled = press(calc, key)
        steps.append(TraceStep(key, handled, calc.current_display_value(), calc.snapshot()))

    if trace:
        render_trace(steps, console)
    if as_json:
        payload = {"display": calc.current_display_value(), "state": calc.snapshot().to_dict()}
        typer.echo(json.dumps(payload, indent=2))
        return
    render_display(calc.current_display_value(), out)


@app.command("repl")
def cmd_repl(
    framed: bool = typer.Option(True, "--framed/--plain", help="Frame the display like a screen"),
) -> None:
    """Interactive keypad: type keys, press return to see the display."""
    calc = _make_calculator()
    names = _key_names(calc)
    console.print("[dim]Keys: 0-9 . + - × ÷ = Enter AC Escape M+  (quit to exit)[/dim]")
    render_display(calc.current_display_value(), out, framed=framed)

    while True:
        try:
            line = console.input("[bold]> [/bold]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        for key in split_keys(line, names):
            if not press(calc, key):
                console.print(f"  [yellow]Ignored key:[/yellow] {key!r}")
        render_display(calc.current_display_value(), out, framed=framed)


@app.command("symbols")
def cmd_symbols() -> None:
    """Show accepted operator symbols."""
    calc = _make_calculator()
    render_symbols(calc.symbols, console)


if __name__ == "__main__":
    app()
