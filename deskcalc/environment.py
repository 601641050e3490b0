"""Configuration for deskcalc engines, read from the process environment.

Every setting has a code default; DESKCALC_* variables override it:

    DESKCALC_DISPLAY_WIDTH      string length above which exponential form is used (16)
    DESKCALC_EXPONENT_DIGITS    fractional digits in exponential form (8)
    DESKCALC_OPERATOR_SYMBOLS   extra operator symbols, e.g. "x=multiply,:=/"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from deskcalc.formatting import DISPLAY_WIDTH, EXPONENT_DIGITS
from deskcalc.models import Operator
from deskcalc.operators import DEFAULT_SYMBOLS, build_symbol_table

ENV_PREFIX = "DESKCALC_"


class ConfigError(ValueError):
    """A DESKCALC_* variable has a malformed value."""


@dataclass(frozen=True)
class CalculatorConfig:
    """Settings shared by an engine and its presenter."""

    display_width: int = DISPLAY_WIDTH
    exponent_digits: int = EXPONENT_DIGITS
    extra_symbols: dict[str, Operator] = field(default_factory=dict)

    def symbol_table(self) -> dict[str, Operator]:
        """Default symbols plus the configured extras."""
        return build_symbol_table(self.extra_symbols)


def _read_int(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def _resolve_operator(name: str) -> Operator:
    """Accept a canonical name ('multiply') or a default symbol ('*')."""
    if name in DEFAULT_SYMBOLS:
        return DEFAULT_SYMBOLS[name]
    try:
        return Operator(name.lower())
    except ValueError:
        raise ConfigError(f"Unknown operator {name!r}") from None


def parse_symbols(raw: str) -> dict[str, Operator]:
    """Parse 'sym=op,sym=op' into a symbol mapping.

    Symbols that clash with keypad keys are rejected later, by
    build_symbol_table.
    """
    symbols: dict[str, Operator] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        symbol, sep, op_name = pair.rpartition("=")
        if not sep or not symbol or not op_name:
            raise ConfigError(f"Expected 'symbol=operator', got {pair!r}")
        symbols[symbol] = _resolve_operator(op_name.strip())
    return symbols


def load_config(env: Optional[Mapping[str, str]] = None) -> CalculatorConfig:
    """Build a CalculatorConfig from DESKCALC_* variables.

    Args:
        env: Variables to read. Defaults to os.environ.

    Raises:
        ConfigError: If any variable is malformed, or the extra symbols
            conflict with the default table.
    """
    env = os.environ if env is None else env
    config = CalculatorConfig(
        display_width=_read_int(env, "DISPLAY_WIDTH", DISPLAY_WIDTH, minimum=1),
        exponent_digits=_read_int(env, "EXPONENT_DIGITS", EXPONENT_DIGITS, minimum=0),
        extra_symbols=parse_symbols(env.get(ENV_PREFIX + "OPERATOR_SYMBOLS", "")),
    )
    try:
        config.symbol_table()
    except ValueError as e:
        raise ConfigError(str(e)) from None
    return config
