"""Locale formatting conventions used by the fallback money layout.

Mirrors the record returned by ``locale.localeconv()`` so a table can be built
either from the system locale or by hand for a fixed presentation.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

# localeconv() reports unspecified numeric fields as CHAR_MAX
CHAR_MAX = 127


class SignPosition(IntEnum):
    """Where the sign goes relative to the value and currency symbol (POSIX ``*_sign_posn``)."""

    PARENTHESES_ENCLOSED = 0
    SIGN_BEFORE_VALUE_AND_SYMBOL = 1
    SIGN_AFTER_VALUE_AND_SYMBOL = 2
    SIGN_BEFORE_SYMBOL = 3
    SIGN_AFTER_SYMBOL = 4


class LocaleConventions(BaseModel):
    """Numeric and monetary formatting conventions for one locale.

    Defaults describe US-English formatting, which is also what the
    convention provider substitutes when the system cannot supply a table.
    """

    model_config = ConfigDict(frozen=True)

    # Plain numbers
    decimal_point: str = "."
    thousands_sep: str = ","

    # Money
    mon_decimal_point: str = "."
    mon_thousands_sep: str = ","
    currency_symbol: str = "$"
    int_curr_symbol: str = "USD"
    positive_sign: str = ""
    negative_sign: str = "-"
    frac_digits: int = Field(default=2, ge=0)
    int_frac_digits: int = Field(default=2, ge=0)

    p_cs_precedes: bool = True
    p_sep_by_space: bool = False
    p_sign_posn: SignPosition = SignPosition.SIGN_BEFORE_VALUE_AND_SYMBOL

    n_cs_precedes: bool = True
    n_sep_by_space: bool = False
    n_sign_posn: SignPosition = SignPosition.SIGN_BEFORE_VALUE_AND_SYMBOL

    encoding: str = "utf-8"

    @property
    def has_monetary_data(self) -> bool:
        return bool(self.mon_decimal_point or self.currency_symbol)

    def sign_rules(self, negative: bool) -> tuple[str, SignPosition, bool, bool]:
        """Return ``(sign_symbol, sign_position, cs_precedes, sep_by_space)`` for one sign."""
        if negative:
            return self.negative_sign, self.n_sign_posn, self.n_cs_precedes, self.n_sep_by_space
        return self.positive_sign, self.p_sign_posn, self.p_cs_precedes, self.p_sep_by_space

    @classmethod
    def from_localeconv(cls, conv: Mapping[str, Any], encoding: str = "utf-8") -> "LocaleConventions":
        """Build a table from a ``locale.localeconv()`` result.

        Fields the C library leaves unspecified (``CHAR_MAX``) keep their
        US-English default.
        """
        data: dict[str, Any] = {"encoding": encoding}
        for name in ("decimal_point", "thousands_sep", "mon_decimal_point", "mon_thousands_sep",
                     "currency_symbol", "positive_sign", "negative_sign"):
            if name in conv:
                data[name] = conv[name]
        if "int_curr_symbol" in conv:
            # POSIX appends the separator character to the 3-letter code
            data["int_curr_symbol"] = conv["int_curr_symbol"].strip()
        for name in ("frac_digits", "int_frac_digits", "p_sign_posn", "n_sign_posn"):
            value = conv.get(name, CHAR_MAX)
            if value != CHAR_MAX:
                data[name] = value
        # sep_by_space may be 2 (space next to the sign), still a separating space
        for name in ("p_cs_precedes", "p_sep_by_space", "n_cs_precedes", "n_sep_by_space"):
            value = conv.get(name, CHAR_MAX)
            if value != CHAR_MAX:
                data[name] = bool(value)
        return cls(**data)


DEFAULT_CONVENTIONS = LocaleConventions()
