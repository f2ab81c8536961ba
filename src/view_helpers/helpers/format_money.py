"""Money formatting view helper.

Formats through babel when enabled, with the currency taken from the call,
the configured default, the locale's territory or finally the system locale
conventions. Without babel, money is laid out by the locale formatting
conventions of the request language and returned in the response encoding.
"""

from __future__ import annotations

import structlog

from view_helpers.helpers.format_number import FormatNumber, check_decimals_count
from view_helpers.international.intl_formatter import FormatterStyle
from view_helpers.international.money_layout import layout_money
from view_helpers.international.numeric_input import as_text, to_number

logger = structlog.get_logger(__name__)


class FormatMoney(FormatNumber):
    """Format money for templates.

    Example::

        format_money = FormatMoney(Settings(lang="en", locale="US"))
        format_money(-1234.5)       # '-$1,234.50'
        format_money("12", 0)       # '$12'
        format_money("n/a")         # 'n/a'
    """

    @property
    def default_currency(self) -> str | None:
        return self.settings.default_currency

    def __call__(self, number=None, decimals_count: int | None = None, currency: str | None = None) -> str:
        return self.format_money(number, decimals_count, currency)

    def format_money(self, number=None, decimals_count: int | None = None, currency: str | None = None) -> str:
        """Format *number* as money.

        :param number: int, float, Decimal or numeric string. Anything else is
            returned as text unchanged.
        :param decimals_count: digits after the decimal point. When ``None``,
            babel uses the currency's own digits and the fallback uses the
            locale's ``frac_digits``.
        :param currency: 3-letter ISO 4217 code, used only by babel formatting.
        :raises FormattingServiceError: babel cannot format the locale/currency.
        """
        value = to_number(number)
        if value is None:
            return as_text(number)
        check_decimals_count(decimals_count)
        if self.intl_formatting:
            return self.format_by_intl(value, decimals_count, currency)
        return self.format_by_locale_conventions(value, decimals_count)

    def format_by_intl(self, value: float | int, decimals_count: int | None = None, currency: str | None = None) -> str:
        formatter = self.get_intl_formatter(FormatterStyle.CURRENCY, decimals_count)
        if currency is None:
            currency = self.resolve_currency(formatter.currency_symbol)
        return formatter.format_currency(value, currency)

    def resolve_currency(self, reported_symbol: str) -> str:
        """Currency when the call gives none: configured default, the formatter's symbol, then conventions."""
        if self.default_currency is not None:
            return self.default_currency
        # Some locales report a sign like "$" instead of a code
        if len(reported_symbol) == 3:
            return reported_symbol
        currency = self.locale_conventions.int_curr_symbol
        logger.debug("currency_resolved_from_conventions", currency=currency,
                     reported_symbol=reported_symbol, locale=self.lang_and_locale)
        return currency

    def format_by_locale_conventions(self, value: float | int, decimals_count: int | None = None) -> str:
        return self.encode(layout_money(value, self.locale_conventions, decimals_count))
