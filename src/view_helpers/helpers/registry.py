"""Helper factory for template environments."""
from __future__ import annotations

from ..config import Settings
from ..utils.logging import setup_logging
from .format_money import FormatMoney
from .format_number import FormatNumber


def create_helpers(settings: Settings | None = None, *, configure_logging: bool = True) -> dict[str, FormatNumber]:
    """Build the helpers sharing one ``Settings`` instance.

    The result is ready for ``env.globals.update(...)``. Build it once per
    application and reuse it across requests.
    """
    if settings is None:
        settings = Settings()
    if configure_logging:
        setup_logging(settings.log_level)
    return {
        "format_number": FormatNumber(settings),
        "format_money": FormatMoney(settings),
    }
