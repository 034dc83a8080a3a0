"""Display rounding and division that follow floating-point semantics instead of raising."""

from __future__ import annotations

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: float) -> Number:
    """Round to the nearest integer, halves toward positive infinity.

    ``round()`` uses banker's rounding (``round(0.5) == 0``); snapshot values are
    rounded the way the calculator display rounds instead. The fractional part is
    compared directly so values just below a half never round up.
    Non-finite values are returned as-is.
    """
    if math.isnan(value) or math.isinf(value):
        return value
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide, yielding NaN or a signed infinity for a zero denominator."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def ieee_power(base: float, exponent: int) -> float:
    """``base ** exponent`` that saturates to a signed infinity instead of raising OverflowError."""
    try:
        return base**exponent
    except OverflowError:
        if base < 0 and exponent % 2:
            return -math.inf
        return math.inf
