"""Operator symbol lookup and arithmetic for deskcalc.

Maps accepted input symbols (ASCII and the Unicode variants printed on
calculator keys) onto the four canonical operators, and applies them with
IEEE-754 double arithmetic.
"""

from __future__ import annotations

from typing import Mapping, Optional

from deskcalc.models import ALL_OPERATORS, RESERVED_KEYS, Operator


class DivisionByZero(ZeroDivisionError):
    """Right-hand operand of a division was exactly zero."""


# Accepted key symbols → canonical operator.
# U+2212 MINUS SIGN, U+00D7 MULTIPLICATION SIGN, U+00F7 DIVISION SIGN.
DEFAULT_SYMBOLS: dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "−": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "×": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "÷": Operator.DIVIDE,
}


def build_symbol_table(extra: Optional[Mapping[str, Operator]] = None) -> dict[str, Operator]:
    """Return the default symbol table extended with ``extra`` symbols.

    Extras can add symbols but never rebind a default one, so the table
    always stays total over the four canonical operators.

    Raises:
        ValueError: If an extra symbol is empty, contains whitespace, is a
            digit or command key ('=', 'Enter', 'M+', ...), or rebinds a
            default symbol to a different operator.
    """
    table = dict(DEFAULT_SYMBOLS)
    for symbol, op in (extra or {}).items():
        if not symbol or symbol.split() != [symbol]:
            raise ValueError(f"Operator symbol must be a single non-blank token, got {symbol!r}")
        if symbol in RESERVED_KEYS:
            raise ValueError(f"Symbol {symbol!r} is already a keypad key")
        existing = table.get(symbol)
        if existing is not None and existing != op:
            raise ValueError(
                f"Symbol {symbol!r} already means {existing.value}, cannot rebind to {op.value}"
            )
        table[symbol] = Operator(op)

    missing = [op for op in ALL_OPERATORS if op not in table.values()]
    if missing:
        raise ValueError(f"Symbol table has no symbol for: {', '.join(m.value for m in missing)}")
    return table


def parse_operator(symbol: str, table: Optional[Mapping[str, Operator]] = None) -> Optional[Operator]:
    """Look up the canonical operator for a symbol, or None if unrecognized."""
    return (table if table is not None else DEFAULT_SYMBOLS).get(symbol)


def apply_operator(op: Operator, a: float, b: float) -> float:
    """Apply ``op`` to ``a`` and ``b``.

    Raises:
        DivisionByZero: If ``op`` is DIVIDE and ``b`` is zero (either sign).
    """
    if op == Operator.ADD:
        return a + b
    if op == Operator.SUBTRACT:
        return a - b
    if op == Operator.MULTIPLY:
        return a * b
    if op == Operator.DIVIDE:
        if b == 0:
            raise DivisionByZero(f"{a} / {b}")
        return a / b
    raise ValueError(f"Unknown operator: {op!r}")
