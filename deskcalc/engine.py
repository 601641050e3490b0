"""Calculator engine: running-total state machine behind a four-function keypad.

State per instance:
    current_entry     text being typed or the last result ('0' initially)
    pending_operand   left-hand operand waiting for the operator's second argument
    pending_operator  operator waiting for its right-hand operand
    last_operation    operator + right operand replayed by repeated '='
    just_evaluated    next digit starts a fresh entry instead of appending
    accumulator       memory register fed by add_to_memory(), survives clear()

pending_operand and pending_operator are set and cleared together.
"""

from __future__ import annotations

import math
from typing import Optional

from deskcalc.environment import CalculatorConfig
from deskcalc.formatting import format_display, number_to_string, to_number
from deskcalc.models import DIGIT_TOKENS, ERROR, EngineState, LastOperation, Operator
from deskcalc.operators import DivisionByZero, apply_operator, parse_operator


class Calculator:
    """One independent calculator.

    All commands return None; read the result with current_display_value().
    Division by zero never escapes: the engine resets and shows 'Error'.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self.symbols = self.config.symbol_table()
        self._accumulator = 0.0
        self.clear()

    @property
    def accumulator(self) -> float:
        """Memory register. No command reads it back into the display."""
        return self._accumulator

    # --- Commands ---

    def clear(self) -> None:
        """Reset the display state. The memory accumulator is kept."""
        self.current_entry = "0"
        self.pending_operand: Optional[float] = None
        self.pending_operator: Optional[Operator] = None
        self.last_operation: Optional[LastOperation] = None
        self.just_evaluated = False

    def input_digit(self, token: str) -> None:
        """Type one of '0'-'9' or '.'. Other tokens are ignored."""
        if token not in DIGIT_TOKENS:
            return

        if self.just_evaluated:
            self.current_entry = "0." if token == "." else token
            self.just_evaluated = False
            return

        if token == ".":
            if "." not in self.current_entry:
                self.current_entry += "."
        elif self.current_entry == "0":
            self.current_entry = token
        else:
            self.current_entry += token

    def set_operator(self, symbol: str) -> None:
        """Choose the next operator. Unrecognized symbols are ignored.

        A pending expression that has not just been evaluated is completed
        first, so '2 + 3 ×' continues as '5 ×'. That silent evaluation is not
        remembered for repeated '='.
        """
        op = parse_operator(symbol, self.symbols)
        if op is None:
            return

        if self.pending_operator is not None and self.pending_operand is not None and not self.just_evaluated:
            result = self._evaluate(persist=False)
            if result is None:
                # Chained division by zero: keep showing the error.
                return
            self.pending_operand = result
        else:
            self.pending_operand = to_number(self.current_entry)

        self.pending_operator = op
        self.just_evaluated = False
        self.current_entry = "0"

    def press_equals(self) -> None:
        """'=': evaluate the pending expression, or replay the last operation.

        With nothing pending, the last completed operator and right operand
        are applied to the current value ('5 + 2 = = =' gives 7, 9, 11).
        """
        if self.pending_operator is not None and self.pending_operand is not None:
            self._evaluate(persist=True)
            return

        if self.last_operation is None:
            return
        a = to_number(self.current_entry)
        if not math.isfinite(a):
            return
        self._complete(self.last_operation.operator, a, self.last_operation.operand)

    def add_to_memory(self) -> None:
        """'M+': add the current value to the accumulator if it is finite."""
        n = to_number(self.current_entry)
        if math.isfinite(n):
            self._accumulator += n

    # --- Queries ---

    def current_display_value(self) -> str:
        """Formatted display text for the current entry."""
        return format_display(
            self.current_entry,
            width=self.config.display_width,
            fraction_digits=self.config.exponent_digits,
        )

    def snapshot(self) -> EngineState:
        """Immutable copy of the current state."""
        return EngineState(
            current_entry=self.current_entry,
            pending_operand=self.pending_operand,
            pending_operator=self.pending_operator,
            last_operation=self.last_operation,
            just_evaluated=self.just_evaluated,
            accumulator=self._accumulator,
        )

    # --- Internals ---

    def _evaluate(self, persist: bool) -> Optional[float]:
        """Complete the pending expression.

        Returns the numeric result, or None when nothing was pending or the
        division-by-zero error was shown instead.
        """
        if self.pending_operator is None or self.pending_operand is None:
            return None

        op = self.pending_operator
        b = to_number(self.current_entry)
        result = self._complete(op, self.pending_operand, b)
        if result is None:
            return None

        if persist:
            self.last_operation = LastOperation(operator=op, operand=b)
        self.pending_operand = None
        self.pending_operator = None
        return result

    def _complete(self, op: Operator, a: float, b: float) -> Optional[float]:
        """Apply op and show the result, or show the error on division by zero."""
        try:
            result = apply_operator(op, a, b)
        except DivisionByZero:
            self._show_error()
            return None
        self.current_entry = number_to_string(result)
        self.just_evaluated = True
        return result

    def _show_error(self) -> None:
        self.clear()
        self.current_entry = ERROR
        self.just_evaluated = True
