"""Plain number formatting with explicit separators."""
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP, localcontext


def format_plain_number(value: float | int, decimals: int = 0, decimal_point: str = ".",
                        thousands_sep: str = ",") -> str:
    """Format *value* with a fixed number of fractional digits and grouped thousands.

    Rounds half away from zero on the shortest decimal representation, so
    ``1.005`` with 2 decimals gives ``1.01`` rather than the binary float's
    ``1.00``. With ``decimals == 0`` there is no decimal point at all.
    """
    if decimals < 0:
        raise ValueError(f"Decimals count must not be negative, got {decimals}")

    text = str(value)
    with localcontext() as ctx:
        # wide enough for any float magnitude
        ctx.prec = max(330, len(text)) + decimals
        quantized = Decimal(text).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    negative = quantized < 0
    digits = f"{abs(quantized):f}"
    integer_part, _, fractional_part = digits.partition(".")

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    result = thousands_sep.join(groups)

    if decimals > 0:
        result += decimal_point + fractional_part
    return "-" + result if negative else result
