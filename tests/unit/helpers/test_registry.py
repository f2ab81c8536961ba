"""Test helper factory."""
import structlog
from view_helpers.config import Settings
from view_helpers.helpers.format_money import FormatMoney
from view_helpers.helpers.format_number import FormatNumber
from view_helpers.helpers.registry import create_helpers


class TestCreateHelpers:
    def test_shared_settings(self):
        settings = Settings(default_currency="EUR")
        helpers = create_helpers(settings, configure_logging=False)
        assert isinstance(helpers["format_money"], FormatMoney)
        assert type(helpers["format_number"]) is FormatNumber
        assert helpers["format_money"].settings is settings
        assert helpers["format_number"].settings is settings

    def test_helpers_are_callable(self):
        helpers = create_helpers(Settings(lang="en", locale="US"), configure_logging=False)
        assert helpers["format_money"](5, 0) == "$5"
        assert helpers["format_number"](5, 0) == "5"

    def test_configures_logging(self):
        try:
            create_helpers(Settings(log_level="ERROR"))
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()
