"""
Tests for services/odds_converter.py

Run with: pytest tests/test_odds_converter.py -v
"""

import pytest

from paperbet.services.odds_converter import (
    convert,
    convert_from_american,
    convert_from_decimal,
    convert_from_fractional,
    convert_from_implied,
    quote_payout,
)


class TestConvertFromEachFormat:

    def test_from_american(self):
        quote = convert_from_american("+150")

        assert quote.american == 150
        assert quote.decimal == pytest.approx(2.5)
        assert quote.fractional == "3/2"
        assert quote.implied_probability == pytest.approx(40.0)

    def test_from_decimal(self):
        quote = convert_from_decimal("1.5")

        assert quote.american == -200
        assert quote.fractional == "1/2"
        assert quote.implied_probability == pytest.approx(66.67, abs=0.01)

    def test_from_fractional_keeps_typed_text(self):
        quote = convert_from_fractional(" 10/11 ")

        assert quote.fractional == "10/11"
        assert quote.american == -110
        assert quote.decimal == pytest.approx(1.909, abs=0.001)

    def test_from_implied_percent(self):
        quote = convert_from_implied("50")

        assert quote.decimal == pytest.approx(2.0)
        assert quote.american == 100

    def test_short_american_line_is_displayed(self):
        """The converter applies only the permissive parse."""
        quote = convert_from_american("+50")
        assert quote.decimal == pytest.approx(1.5)
        assert quote.american == 50


class TestUnconvertible:

    @pytest.mark.parametrize("text", ["", "abc", "0"])
    def test_american(self, text):
        assert convert_from_american(text) is None

    @pytest.mark.parametrize("text", ["", "1", "0.5", "x"])
    def test_decimal(self, text):
        assert convert_from_decimal(text) is None

    @pytest.mark.parametrize("text", ["", "3", "0/5", "a/b", "3/0"])
    def test_fractional(self, text):
        assert convert_from_fractional(text) is None

    @pytest.mark.parametrize("text", ["0", "100", "-5", "y"])
    def test_implied(self, text):
        assert convert_from_implied(text) is None

    @pytest.mark.parametrize("text", ["1e308", "1.0000001", "20000"])
    def test_decimal_outside_quotable_range(self, text):
        assert convert_from_decimal(text) is None

    @pytest.mark.parametrize("text", ["1e-320", "0.001", "99.9999"])
    def test_implied_outside_quotable_range(self, text):
        assert convert_from_implied(text) is None

    def test_fractional_outside_quotable_range(self):
        assert convert_from_fractional("1e308/1e-10") is None

    def test_american_outside_quotable_range(self):
        assert convert_from_american("-1" + "0" * 19) is None


class TestDispatch:

    def test_numeric_american_value(self):
        assert convert(-110, "american").american == -110

    def test_integral_float_american_value(self):
        assert convert(-110.0, "american").american == -110

    def test_decimal_number(self):
        assert convert(2.5, "decimal").american == 150

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            convert("2.5", "hongkong")


class TestQuotePayout:

    def test_payout(self):
        to_win, payout = quote_payout("10", convert_from_american("+150"))
        assert to_win == pytest.approx(15.0)
        assert payout == pytest.approx(25.0)

    def test_bad_stake_is_zero(self):
        assert quote_payout("", convert_from_american("+150")) == (0.0, 0.0)
