"""Conversion between display strings and numbers.

The engine keeps typed input as text and operands as floats. This module is
the single conversion point between the two:

- ``to_number``: lenient parse, anything non-numeric becomes NaN
- ``number_to_string``: canonical shortest form ('7', '0.1', '1e+21')
- ``format_display``: what the display shows, switching to exponential
  notation once the string grows past the display width
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from deskcalc.models import ERROR

DISPLAY_WIDTH = 16
EXPONENT_DIGITS = 8

# Decimal-point positions outside (-6, 21] switch to exponent form.
_MIN_PLAIN_EXPONENT = -6
_MAX_PLAIN_EXPONENT = 21


def to_number(text: str) -> float:
    """Parse a display string, returning NaN for anything non-numeric."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return math.nan


def _shortest_digits(value: float) -> tuple[str, int]:
    """Shortest round-trip digits of a positive finite float.

    Returns (digits, exponent) such that value == int(digits) * 10**exponent,
    with no trailing zeros in digits.
    """
    _, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    return "".join(str(d) for d in digits), int(exponent)


def number_to_string(value: float) -> str:
    """Render a number in canonical shortest form.

    Integers print without a fractional part ('7'), plain decimals for
    magnitudes in [1e-6, 1e21), exponent form beyond that ('1e+21',
    '1.5e-7'). Negative zero prints as '0'.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, exponent = _shortest_digits(abs(value))
    k = len(digits)
    # n: position of the decimal point relative to the first digit
    n = k + exponent

    if k <= n <= _MAX_PLAIN_EXPONENT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _MAX_PLAIN_EXPONENT:
        body = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_PLAIN_EXPONENT < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def to_exponential(value: float, fraction_digits: int = EXPONENT_DIGITS) -> str:
    """Normalized exponential notation, e.g. 1.23456789e+21.

    The exponent carries an explicit sign and no zero padding. Rounding
    works on the exact binary value and breaks ties away from zero, so
    12345678850000000 gives 1.23456789e+16.
    """
    if value == 0:
        return ("0." + "0" * fraction_digits if fraction_digits else "0") + "e+0"

    exact = Decimal(value)
    e = exact.adjusted()
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, fraction_digits + 2)
        rounded = exact.quantize(Decimal(1).scaleb(e - fraction_digits), rounding=ROUND_HALF_UP)
    sign, digits, _ = rounded.as_tuple()
    if len(digits) > fraction_digits + 1:
        # 9.99...95 rounded up to 10.00...0
        e += 1
        digits = digits[: fraction_digits + 1]

    text = "".join(str(d) for d in digits)
    mantissa = text[0] + (f".{text[1:]}" if fraction_digits else "")
    return f"{'-' if sign else ''}{mantissa}e{'-' if e < 0 else '+'}{abs(e)}"


def format_display(
    value: str,
    width: int = DISPLAY_WIDTH,
    fraction_digits: int = EXPONENT_DIGITS,
) -> str:
    """Format a display string for presentation.

    Strings longer than ``width`` are rendered in exponential notation with
    ``fraction_digits`` fractional digits. Non-finite values render as the
    error literal. Everything else is returned unchanged.
    """
    num = to_number(value)
    if not math.isfinite(num):
        return ERROR
    if len(value) > width:
        return to_exponential(num, fraction_digits)
    return value
