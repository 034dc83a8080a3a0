"""Permissive number coercion for user-entered parameters."""

from __future__ import annotations

import math
import re
from typing import Any

# Longest leading ASCII decimal literal, e.g. "12.5abc" -> "12.5", "-.5e3x" -> "-.5e3".
_LEADING_NUMBER = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def coerce_number(value: Any) -> float:
    """Parse ``value`` as a float, falling back to ``0.0`` when it is not a usable number.

    Mirrors the "parse or zero" policy of the calculator inputs: failed parses,
    ``None``, NaN, infinities and integers too large for a float all become zero
    instead of raising.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        number = _parse_text(value)
    else:
        return 0.0

    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _parse_text(text: str) -> float:
    match = _LEADING_NUMBER.match(text.strip())
    if match is None:
        return 0.0
    return float(match.group(0))
