"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock
from view_helpers.config import Settings
from view_helpers.international.intl_formatter import FormattingService, NumberFormatter
from view_helpers.international.locale_conventions import SystemLocaleConventionsProvider
from tests.factories import make_us_conventions, make_trailing_euro_conventions


@pytest.fixture
def fallback_settings():
    """Settings that route formatting through locale conventions."""
    return Settings(lang="en", locale="US", intl_formatting=False)


@pytest.fixture
def us_conventions():
    return make_us_conventions()


@pytest.fixture
def euro_conventions():
    return make_trailing_euro_conventions()


@pytest.fixture
def conventions_provider(us_conventions):
    """Provider mock that resolves to US-English conventions."""
    provider = MagicMock(spec=SystemLocaleConventionsProvider)
    provider.resolve.return_value = us_conventions
    return provider


@pytest.fixture
def stub_formatter():
    """Currency formatter that echoes the currency it was asked for."""
    formatter = MagicMock(spec=NumberFormatter)
    formatter.currency_symbol = "CHF"
    formatter.format_currency.side_effect = lambda value, currency: f"{currency} {value}"
    return formatter


@pytest.fixture
def stub_service(stub_formatter):
    service = MagicMock(spec=FormattingService)
    service.create_formatter.return_value = stub_formatter
    return service
