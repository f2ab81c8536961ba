"""Numeric input normalization for template helpers.

Templates hand helpers whatever they have: ints, floats, Decimals from the
ORM, or strings straight from a form. Anything numeric becomes a float,
anything else is rendered back as text untouched.
"""
from __future__ import annotations
import math
import re
from decimal import Decimal

# Same shape PHP's is_numeric() accepts: 12, -1.5, .5, 3., 1e3, " 42 "
_NUMERIC_STRING = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$')


def is_numeric(value: object) -> bool:
    """True for ints, finite floats, Decimals and numeric strings. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        return _NUMERIC_STRING.match(value) is not None
    return False


def to_number(value: object) -> float | int | None:
    """Parse-or-pass-through step: the numeric magnitude, or None when *value* is not numeric."""
    if not is_numeric(value):
        return None
    if isinstance(value, (str, Decimal)):
        number = float(value)
        # "1e400" is numeric text but overflows a float
        return number if math.isfinite(number) else None
    return value


def as_text(value: object) -> str:
    """Render a non-numeric value the way a template prints it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)
