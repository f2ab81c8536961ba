"""Helper configuration via environment variables with VIEW_HELPERS_ prefix."""

from __future__ import annotations

import codecs
import locale

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """View helper configuration.

    All settings are read from environment variables prefixed with
    ``VIEW_HELPERS_``. A single ``Settings`` instance is meant to be built once
    and passed explicitly to every helper that should share it.
    """

    model_config = SettingsConfigDict(env_prefix="VIEW_HELPERS_")

    # ── Request language and locale ─────────────────────────────────────
    lang: str = "en"
    locale: str = "US"

    # ── Money ───────────────────────────────────────────────────────────
    # 3-letter ISO 4217 code, used only by the babel formatting path
    default_currency: str | None = None
    default_decimals: int = Field(default=2, ge=0)

    # ── Formatting backends ─────────────────────────────────────────────
    # Disable to always format by locale conventions
    intl_formatting: bool = True
    locale_categories: list[str] = Field(default=["LC_NUMERIC", "LC_MONETARY"])

    # ── Output ──────────────────────────────────────────────────────────
    output_encoding: str = "utf-8"
    log_level: str = "INFO"

    @field_validator("default_currency")
    @classmethod
    def _check_currency(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().upper()
        if len(value) != 3 or not value.isalpha():
            raise ValueError(f"Currency must be a 3-letter ISO 4217 code, got {value!r}")
        return value

    @field_validator("locale_categories")
    @classmethod
    def _check_categories(cls, value: list[str]) -> list[str]:
        for name in value:
            if not name.startswith("LC_") or not hasattr(locale, name):
                raise ValueError(f"Unknown locale category: {name}")
        return value

    @field_validator("output_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as e:
            raise ValueError(f"Unknown output encoding: {value}") from e

    @property
    def lang_and_locale(self) -> str:
        """Babel style identifier, e.g. ``en_US``; only the language when no locale is set."""
        if self.locale:
            return f"{self.lang}_{self.locale}"
        return self.lang

    @property
    def locale_category_values(self) -> list[int]:
        return [getattr(locale, name) for name in self.locale_categories]
