"""Test money layout by locale conventions."""
import pytest
from view_helpers.international.money_layout import layout_money
from view_helpers.models.locale import SignPosition
from tests.factories import make_us_conventions, make_trailing_euro_conventions


class TestUSLayout:
    def test_negative(self, us_conventions):
        assert layout_money(-1234.5, us_conventions, 2) == "-$1,234.50"

    def test_positive(self, us_conventions):
        assert layout_money(1234.5, us_conventions, 2) == "$1,234.50"

    def test_default_decimals_from_table(self, us_conventions):
        assert layout_money(3, us_conventions) == "$3.00"

    def test_table_frac_digits(self):
        conventions = make_us_conventions(frac_digits=3)
        assert layout_money(1.5, conventions) == "$1.500"

    def test_zero_decimals(self, us_conventions):
        assert layout_money(5, us_conventions, 0) == "$5"

    def test_zero_takes_positive_rules(self):
        conventions = make_us_conventions(n_sign_posn=SignPosition.PARENTHESES_ENCLOSED)
        assert layout_money(0, conventions, 2) == "$0.00"


class TestTrailingSymbolLayout:
    def test_positive(self, euro_conventions):
        assert layout_money(1234.5, euro_conventions, 2) == "1,234.50 €"

    def test_negative_sign_after_value_and_symbol(self, euro_conventions):
        assert layout_money(-1234.5, euro_conventions, 2) == "1,234.50 €-"

    def test_german_separators(self):
        conventions = make_trailing_euro_conventions(
            mon_decimal_point=",", mon_thousands_sep=".",
            n_sign_posn=SignPosition.SIGN_BEFORE_VALUE_AND_SYMBOL,
        )
        assert layout_money(-1234.5, conventions, 2) == "-1.234,50 €"

    def test_no_space(self):
        conventions = make_trailing_euro_conventions(p_sep_by_space=False)
        assert layout_money(7, conventions, 0) == "7€"

    def test_symbol_adjacent_sign_ignored_when_symbol_follows(self):
        conventions = make_trailing_euro_conventions(n_sign_posn=SignPosition.SIGN_BEFORE_SYMBOL)
        assert layout_money(-5, conventions, 2) == "5.00 €"


class TestSignPositions:
    def test_parentheses(self):
        conventions = make_us_conventions(n_sign_posn=SignPosition.PARENTHESES_ENCLOSED)
        result = layout_money(-1234.5, conventions, 2)
        assert result == "($1,234.50)"
        assert "-" not in result

    def test_sign_before_symbol(self):
        conventions = make_us_conventions(n_sign_posn=SignPosition.SIGN_BEFORE_SYMBOL)
        assert layout_money(-5, conventions, 2) == "-$5.00"

    def test_sign_after_symbol(self):
        conventions = make_us_conventions(n_sign_posn=SignPosition.SIGN_AFTER_SYMBOL)
        assert layout_money(-5, conventions, 2) == "$-5.00"

    def test_sign_after_symbol_with_space(self):
        conventions = make_us_conventions(n_sign_posn=SignPosition.SIGN_AFTER_SYMBOL, n_sep_by_space=True)
        assert layout_money(-5, conventions, 2) == "$- 5.00"

    def test_sign_after_value_and_symbol(self):
        conventions = make_us_conventions(n_sign_posn=SignPosition.SIGN_AFTER_VALUE_AND_SYMBOL)
        assert layout_money(-5, conventions, 2) == "$5.00-"

    def test_positive_sign_symbol(self):
        conventions = make_us_conventions(positive_sign="+")
        assert layout_money(5, conventions, 2) == "+$5.00"

    @pytest.mark.parametrize("position", list(SignPosition))
    def test_every_position_keeps_magnitude(self, position):
        conventions = make_us_conventions(n_sign_posn=position)
        assert "1,234.50" in layout_money(-1234.5, conventions, 2)
