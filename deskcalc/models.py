"""Data models for the deskcalc engine.

Operator enum, LastOperation, EngineState — the typed structures that flow
through operators → engine → presenter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Literal shown when an evaluation fails (division by zero) or a value
# cannot be displayed as a finite number.
ERROR = "Error"

# Key names with a fixed meaning on the keypad. Operator symbols may not
# reuse them.
DIGIT_TOKENS = frozenset("0123456789.")
EQUALS_KEYS = frozenset({"=", "Enter"})
CLEAR_KEYS = frozenset({"Escape", "AC"})
MEMORY_KEYS = frozenset({"M+"})
NAMED_KEYS = frozenset({"Enter", "Escape", "AC", "M+"})
RESERVED_KEYS = DIGIT_TOKENS | EQUALS_KEYS | CLEAR_KEYS | MEMORY_KEYS


class Operator(str, Enum):
    """Canonical arithmetic operators."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


ALL_OPERATORS = [Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE]


@dataclass(frozen=True)
class LastOperation:
    """Operator and right-hand operand of the last completed evaluation.

    Replayed by repeated "=" presses against the current value.
    """

    operator: Operator
    operand: float

    def to_dict(self) -> dict:
        return {"operator": self.operator.value, "operand": self.operand}


@dataclass(frozen=True)
class EngineState:
    """Immutable snapshot of a Calculator's state at a point in time."""

    current_entry: str = "0"
    pending_operand: Optional[float] = None
    pending_operator: Optional[Operator] = None
    last_operation: Optional[LastOperation] = None
    just_evaluated: bool = False
    accumulator: float = 0.0

    @property
    def has_pending(self) -> bool:
        """True when both halves of a pending expression are present."""
        return self.pending_operator is not None and self.pending_operand is not None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "current_entry": self.current_entry,
            "pending_operand": self.pending_operand,
            "pending_operator": self.pending_operator.value if self.pending_operator else None,
            "last_operation": self.last_operation.to_dict() if self.last_operation else None,
            "just_evaluated": self.just_evaluated,
            "accumulator": self.accumulator,
        }
