"""Locale-aware number formatting service backed by babel (CLDR data)."""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from enum import Enum

import structlog
from babel import Locale, UnknownLocaleError
from babel.numbers import UnknownCurrencyError, get_territory_currencies, validate_currency

logger = structlog.get_logger(__name__)


class FormattingServiceError(Exception):
    """The formatting service cannot format for the given locale or currency."""

    def __init__(self, message: str, *, lang_and_locale: str | None = None, currency: str | None = None):
        super().__init__(message)
        self.lang_and_locale = lang_and_locale
        self.currency = currency


class FormatterStyle(str, Enum):
    DECIMAL = "decimal"
    CURRENCY = "currency"


class NumberFormatter(ABC):
    """A formatter bound to one locale, style and fraction digits setting."""

    @property
    @abstractmethod
    def currency_symbol(self) -> str:
        """International currency symbol of the locale, empty when the locale names no territory."""
        ...

    @abstractmethod
    def format(self, value: float | int) -> str:
        ...

    @abstractmethod
    def format_currency(self, value: float | int, currency: str) -> str:
        ...


class FormattingService(ABC):
    """Creates locale-bound number formatters."""

    @abstractmethod
    def create_formatter(self, lang_and_locale: str, style: FormatterStyle = FormatterStyle.DECIMAL,
                         fraction_digits: int | None = None) -> NumberFormatter:
        ...


class BabelNumberFormatter(NumberFormatter):
    def __init__(self, locale: Locale, style: FormatterStyle, fraction_digits: int | None = None):
        self._locale = locale
        self._style = style
        self._fraction_digits = fraction_digits
        if style is FormatterStyle.CURRENCY:
            pattern = locale.currency_formats["standard"]
        else:
            pattern = locale.decimal_formats[None]
        if fraction_digits is not None:
            pattern = copy.copy(pattern)
            pattern.frac_prec = (fraction_digits, fraction_digits)
        self._pattern = pattern

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def currency_symbol(self) -> str:
        if not self._locale.territory:
            return ""
        currencies = get_territory_currencies(self._locale.territory)
        return currencies[0] if currencies else ""

    def format(self, value: float | int) -> str:
        return self._pattern.apply(value, self._locale)

    def format_currency(self, value: float | int, currency: str) -> str:
        try:
            validate_currency(currency)
        except UnknownCurrencyError as e:
            raise FormattingServiceError(
                f"Unknown currency {currency!r}", lang_and_locale=str(self._locale), currency=currency,
            ) from e
        # Without an explicit fraction digits count the currency's own digits apply (JPY 0, USD 2)
        return self._pattern.apply(
            value, self._locale, currency=currency, currency_digits=self._fraction_digits is None,
        )


class BabelFormattingService(FormattingService):
    def create_formatter(self, lang_and_locale: str, style: FormatterStyle = FormatterStyle.DECIMAL,
                         fraction_digits: int | None = None) -> BabelNumberFormatter:
        try:
            locale = Locale.parse(lang_and_locale)
        except (UnknownLocaleError, ValueError) as e:
            raise FormattingServiceError(
                f"Unknown locale {lang_and_locale!r}", lang_and_locale=lang_and_locale,
            ) from e
        logger.debug("intl_formatter_created", locale=lang_and_locale, style=style.value,
                     fraction_digits=fraction_digits)
        return BabelNumberFormatter(locale, style, fraction_digits)
