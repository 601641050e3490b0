"""Display presenter. Renders engine output with Rich.

Shows the formatted display value, a per-key trace of engine state, and the
accepted operator symbols.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from deskcalc.formatting import number_to_string
from deskcalc.models import ALL_OPERATORS, EngineState, Operator

_OPERATOR_STYLES = {
    Operator.ADD: "green",
    Operator.SUBTRACT: "cyan",
    Operator.MULTIPLY: "yellow",
    Operator.DIVIDE: "magenta",
}


@dataclass
class TraceStep:
    """One key press and the state it left behind."""

    key: str
    handled: bool
    display: str
    state: EngineState


def _fmt_number(n: Optional[float]) -> str:
    if n is None:
        return "--"
    return number_to_string(n)


def _fmt_operator(op: Optional[Operator]) -> str:
    if op is None:
        return "--"
    return f"[{_OPERATOR_STYLES[op]}]{op.value}[/{_OPERATOR_STYLES[op]}]"


def render_display(value: str, console: Console, framed: bool = False) -> None:
    """Print the display value, optionally framed like a calculator screen."""
    if framed:
        console.print(Panel(escape(value), expand=False, title="deskcalc"), highlight=False)
    else:
        console.print(value, highlight=False, markup=False)


def render_trace(steps: list[TraceStep], console: Console) -> None:
    """Render a table of engine state after each key."""
    if not steps:
        console.print("[yellow]No keys pressed.[/yellow]")
        return

    table = Table(title="Key trace", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Key", style="bold")
    table.add_column("Display", justify="right", min_width=16)
    table.add_column("Pending", justify="right")
    table.add_column("Operator")
    table.add_column("Last op")
    table.add_column("Fresh", justify="center")
    table.add_column("Memory", justify="right")

    for i, step in enumerate(steps, start=1):
        s = step.state
        if not step.handled:
            table.add_row(str(i), escape(step.key), "[dim]ignored[/dim]", "", "", "", "", "")
            continue
        last = "--"
        if s.last_operation:
            last = f"{_fmt_operator(s.last_operation.operator)} {_fmt_number(s.last_operation.operand)}"
        table.add_row(
            str(i),
            escape(step.key),
            step.display,
            _fmt_number(s.pending_operand),
            _fmt_operator(s.pending_operator),
            last,
            "yes" if s.just_evaluated else "",
            _fmt_number(s.accumulator),
        )

    console.print()
    console.print(table)
    console.print()


def render_symbols(symbols: Mapping[str, Operator], console: Console) -> None:
    """Render accepted operator symbols grouped by canonical operator."""
    table = Table(title="Operator symbols", show_header=True, header_style="bold")
    table.add_column("Operator", min_width=10)
    table.add_column("Symbols")

    for op in ALL_OPERATORS:
        accepted = [s for s, o in symbols.items() if o == op]
        table.add_row(_fmt_operator(op), "  ".join(escape(s) for s in accepted))

    console.print()
    console.print(table)
    console.print()
