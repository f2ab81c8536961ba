"""Number formatting view helper and the shared base of locale-aware helpers.

Formatting goes through babel when ``intl_formatting`` is enabled, otherwise
it falls back to the locale formatting conventions of the request language.
Those conventions are resolved lazily, once per helper instance, unless they
were given explicitly.
"""

from __future__ import annotations

import threading

import structlog

from view_helpers.config import Settings
from view_helpers.international.intl_formatter import (
    BabelFormattingService,
    FormatterStyle,
    FormattingService,
    NumberFormatter,
)
from view_helpers.international.locale_conventions import SystemLocaleConventionsProvider
from view_helpers.international.number_format import format_plain_number
from view_helpers.international.numeric_input import as_text, to_number
from view_helpers.models.locale import LocaleConventions

logger = structlog.get_logger(__name__)

DEFAULT_SERVICE = BabelFormattingService()


class FormatNumber:
    """Format plain numbers for templates.

    A helper instance may be shared by concurrent requests: the lazy locale
    setup is guarded and the formatter cache only ever gains equal entries.
    Pass ``service=None`` to run without a CLDR formatter at all.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        service: FormattingService | None = DEFAULT_SERVICE,
        conventions: LocaleConventions | None = None,
        conventions_provider: SystemLocaleConventionsProvider | None = None,
    ):
        self.settings = settings or Settings()
        self.service = service
        self._conventions = conventions
        self._conventions_provider = conventions_provider or SystemLocaleConventionsProvider()
        self._initialized = conventions is not None
        self._init_lock = threading.Lock()
        self._formatters: dict[tuple[str, FormatterStyle, int | None], NumberFormatter] = {}

    def __call__(self, number=None, decimals_count: int | None = None) -> str:
        return self.format_number(number, decimals_count)

    @property
    def lang_and_locale(self) -> str:
        return self.settings.lang_and_locale

    @property
    def intl_formatting(self) -> bool:
        return self.service is not None and self.settings.intl_formatting

    @property
    def locale_conventions(self) -> LocaleConventions:
        self.setup_locale_conventions()
        return self._conventions

    def setup_locale_conventions(self) -> None:
        """Resolve locale conventions and encoding once for this helper instance."""
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            self._conventions = self._conventions_provider.resolve(
                self.settings.lang, self.settings.locale, self.settings.locale_category_values,
            )
            self._initialized = True
        logger.debug("locale_conventions_ready", lang=self.settings.lang, locale=self.settings.locale,
                     encoding=self._conventions.encoding)

    def get_intl_formatter(self, style: FormatterStyle, fraction_digits: int | None = None) -> NumberFormatter:
        key = (self.lang_and_locale, style, fraction_digits)
        formatter = self._formatters.get(key)
        if formatter is None:
            formatter = self.service.create_formatter(self.lang_and_locale, style, fraction_digits)
            self._formatters[key] = formatter
        return formatter

    def encode(self, text: str) -> str:
        """Make *text* safe for the response encoding.

        Characters the output encoding cannot carry become XML character
        references, so ``€`` in an ``ascii`` response renders as ``&#8364;``.
        """
        encoding = self.settings.output_encoding
        if encoding == "utf-8":
            return text
        return text.encode(encoding, errors="xmlcharrefreplace").decode(encoding)

    def format_number(self, number=None, decimals_count: int | None = None) -> str:
        value = to_number(number)
        if value is None:
            return as_text(number)
        check_decimals_count(decimals_count)
        decimals = decimals_count if decimals_count is not None else self.settings.default_decimals
        if self.intl_formatting:
            return self.get_intl_formatter(FormatterStyle.DECIMAL, decimals).format(value)

        conventions = self.locale_conventions
        return self.encode(
            format_plain_number(value, decimals, conventions.decimal_point, conventions.thousands_sep)
        )


def check_decimals_count(decimals_count: int | None) -> None:
    if decimals_count is not None and decimals_count < 0:
        raise ValueError(f"Decimals count must not be negative, got {decimals_count}")
