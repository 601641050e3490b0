"""deskcalc — four-function calculator engine.

Holds running-total state, takes digit/operator/command inputs one at a time,
and produces the display text after each. Repeated "=" replays the last
operation; division by zero shows "Error" and the engine carries on.

Usage:
    python -m deskcalc press 5 + 2 = = =    # 11
    python -m deskcalc repl                 # Interactive keypad
"""

from deskcalc.engine import Calculator
from deskcalc.models import ERROR, Operator

__all__ = ["Calculator", "ERROR", "Operator"]
