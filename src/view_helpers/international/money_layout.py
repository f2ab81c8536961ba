"""Money layout by locale formatting conventions.

Used when no CLDR-backed formatter is available or it is switched off. The
absolute value is formatted first, then the currency symbol, the separating
space and the sign (or parentheses) are placed around it following the
``localeconv()`` rules for the value's sign.
"""
from __future__ import annotations

from ..models.locale import LocaleConventions, SignPosition
from .number_format import format_plain_number


def layout_money(value: float | int, conventions: LocaleConventions, decimals_count: int | None = None) -> str:
    """Lay out *value* as money by *conventions*.

    ``decimals_count`` overrides the table's ``frac_digits``. Zero counts as
    non-negative and takes the positive-sign rules.
    """
    negative = value < 0
    decimals = decimals_count if decimals_count is not None else conventions.frac_digits

    result = format_plain_number(abs(value), decimals, conventions.mon_decimal_point, conventions.mon_thousands_sep)

    sign_symbol, sign_position, currency_precedes, separated_by_space = conventions.sign_rules(negative)
    currency = conventions.currency_symbol
    space = " " if separated_by_space else ""

    if currency_precedes:
        if sign_position == SignPosition.SIGN_BEFORE_SYMBOL:
            currency = sign_symbol + currency
        elif sign_position == SignPosition.SIGN_AFTER_SYMBOL:
            currency += sign_symbol
        result = currency + space + result
    else:
        result = result + space + currency

    # Signs outside of both number and symbol
    if sign_position == SignPosition.PARENTHESES_ENCLOSED:
        result = f"({result})"
    elif sign_position == SignPosition.SIGN_BEFORE_VALUE_AND_SYMBOL:
        result = sign_symbol + result
    elif sign_position == SignPosition.SIGN_AFTER_VALUE_AND_SYMBOL:
        result += sign_symbol
    return result
