"""Resolve locale formatting conventions from the system locale database.

``locale.setlocale()`` changes process-wide state, so resolution switches the
requested categories only for the duration of one ``localeconv()`` read and
restores them afterwards, all under a module lock.
"""
from __future__ import annotations

import codecs
import locale
import threading
from typing import Iterable

import structlog

from ..models.locale import DEFAULT_CONVENTIONS, LocaleConventions

logger = structlog.get_logger(__name__)

DEFAULT_CATEGORIES = (locale.LC_NUMERIC, locale.LC_MONETARY)

_setlocale_lock = threading.Lock()


def candidate_locale_names(lang: str, territory: str | None = None) -> list[str]:
    """System locale names to try for a language and territory, most specific first.

    >>> candidate_locale_names("de", "DE")
    ['de_DE.UTF-8', 'de_DE.utf8', 'de_DE', 'de']
    """
    lang = lang.lower()
    names = []
    if territory:
        base = f"{lang}_{territory.upper()}"
        names.extend([f"{base}.UTF-8", f"{base}.utf8", base])
    names.append(lang)
    return names


def encoding_of(locale_name: str) -> str:
    """Codeset of a system locale name, ``utf-8`` when it carries none."""
    normalized = locale.normalize(locale_name)
    _, _, codeset = normalized.partition(".")
    codeset = codeset.partition("@")[0]
    if not codeset:
        return "utf-8"
    try:
        return codecs.lookup(codeset).name
    except LookupError:
        return "utf-8"


class SystemLocaleConventionsProvider:
    """Reads ``localeconv()`` for a request language and locale.

    When none of the candidate locales is installed, or the one found carries
    no monetary data (``C``/``POSIX``), US-English conventions are returned.
    """

    def __init__(self, fallback: LocaleConventions = DEFAULT_CONVENTIONS):
        self._fallback = fallback

    def resolve(self, lang: str, territory: str | None = None,
                categories: Iterable[int] = DEFAULT_CATEGORIES) -> LocaleConventions:
        categories = list(categories)
        candidates = candidate_locale_names(lang, territory)

        with _setlocale_lock:
            previous = {category: locale.setlocale(category) for category in categories}
            try:
                for name in candidates:
                    try:
                        for category in categories:
                            locale.setlocale(category, name)
                    except locale.Error:
                        continue
                    conventions = LocaleConventions.from_localeconv(locale.localeconv(), encoding_of(name))
                    break
                else:
                    conventions = None
            finally:
                for category, value in previous.items():
                    locale.setlocale(category, value)

        if conventions is None:
            logger.warning("locale_conventions_fallback", reason="locale_not_installed",
                           candidates=candidates)
            return self._fallback
        if not conventions.has_monetary_data:
            logger.warning("locale_conventions_fallback", reason="no_monetary_data", locale=name)
            return self._fallback

        logger.debug("locale_conventions_resolved", locale=name, encoding=conventions.encoding)
        return conventions
