"""Input adapter: translate key names into Calculator commands.

Key names follow keyboard/keypad labels:
    '0'-'9', '.'      digit entry
    operator symbols  anything in the engine's symbol table ('+', '×', '÷', ...)
    '=', 'Enter'      equals
    'Escape', 'AC'    clear
    'M+'              add to memory
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from deskcalc.engine import Calculator
from deskcalc.models import CLEAR_KEYS, DIGIT_TOKENS, EQUALS_KEYS, MEMORY_KEYS, NAMED_KEYS


class KeyAction(str, Enum):
    """What a key does to the engine."""

    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    MEMORY_ADD = "memory-add"


def classify_key(calc: Calculator, key: str) -> Optional[KeyAction]:
    """Classify a key for this engine, or None if the key does nothing."""
    if key in CLEAR_KEYS:
        return KeyAction.CLEAR
    if key in MEMORY_KEYS:
        return KeyAction.MEMORY_ADD
    if key in EQUALS_KEYS:
        return KeyAction.EQUALS
    if key in DIGIT_TOKENS:
        return KeyAction.DIGIT
    if key in calc.symbols:
        return KeyAction.OPERATOR
    return None


def press(calc: Calculator, key: str) -> bool:
    """Send one key to the engine. Returns False for ignored keys."""
    action = classify_key(calc, key)
    if action is None:
        return False

    if action == KeyAction.CLEAR:
        calc.clear()
    elif action == KeyAction.MEMORY_ADD:
        calc.add_to_memory()
    elif action == KeyAction.EQUALS:
        calc.press_equals()
    elif action == KeyAction.DIGIT:
        calc.input_digit(key)
    else:
        calc.set_operator(key)
    return True


def feed(calc: Calculator, keys: Iterable[str]) -> int:
    """Press keys in order. Returns how many were handled."""
    return sum(1 for key in keys if press(calc, key))


def split_keys(text: str, names: Iterable[str] = NAMED_KEYS) -> list[str]:
    """Split typed text into key names.

    Whitespace separates chunks. A chunk found in ``names`` ('Enter', 'M+')
    stays whole; any other chunk becomes one key per character, so
    '12+3=' → ['1', '2', '+', '3', '='].
    """
    names = frozenset(names)
    keys: list[str] = []
    for chunk in text.split():
        if chunk in names:
            keys.append(chunk)
        else:
            keys.extend(chunk)
    return keys
