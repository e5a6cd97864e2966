"""Unit tests for locale-aware currency formatting."""

import pytest
from pydantic import ValidationError

from utilkit.utils.conversion.currency import (
    CurrencyOptions,
    format_currency,
    format_cny,
    format_usd,
    format_eur,
)


class TestFormatCurrency:
    """Test format_currency function."""

    def test_default_is_usd_en_us(self):
        assert format_currency(1234.56) == "$1,234.56"

    def test_euro_in_german_locale(self):
        assert format_currency(1234.56, {"locale": "de-DE", "currency": "EUR"}) == "1.234,56 €"

    def test_keyword_overrides(self):
        assert format_currency(1234.56, currency="EUR", locale="de-DE") == "1.234,56 €"

    def test_overrides_win_over_options(self):
        options = CurrencyOptions(currency="EUR", locale="de-DE")
        assert format_currency(1234.56, options, currency="USD", locale="en-US") == "$1,234.56"

    def test_minimum_fraction_digits_pads(self):
        assert format_currency(1234.5, minimum_fraction_digits=3) == "$1,234.500"

    def test_maximum_below_minimum_is_raised(self):
        result = format_currency(1234.5, minimum_fraction_digits=3, maximum_fraction_digits=1)
        assert result == "$1,234.500"

    def test_maximum_fraction_digits_rounds(self):
        assert format_currency(1234.5678, maximum_fraction_digits=3) == "$1,234.568"

    def test_small_amount_keeps_digits(self):
        assert format_currency(0.000001, minimum_fraction_digits=6, maximum_fraction_digits=6) == "$0.000001"

    @pytest.mark.parametrize("amount,overrides,expected", [
        (0.125, {}, "$0.13"),
        (-0.125, {}, "-$0.13"),
        (2.5, {"minimum_fraction_digits": 0, "maximum_fraction_digits": 0}, "$3"),
        (3.5, {"minimum_fraction_digits": 0, "maximum_fraction_digits": 0}, "$4"),
    ])
    def test_halves_round_away_from_zero(self, amount, overrides, expected):
        assert format_currency(amount, **overrides) == expected

    def test_float_rounded_by_shortest_repr(self):
        assert format_currency(1.005) == "$1.01"

    def test_zero(self):
        assert format_currency(0) == "$0.00"

    def test_negative(self):
        assert format_currency(-1234.56) == "-$1,234.56"

    def test_no_non_breaking_spaces(self):
        assert "\u00a0" not in format_currency(1234.56, locale="fr-FR", currency="EUR")

    def test_underscore_locale_accepted(self):
        assert format_currency(1234.56, locale="en_US") == "$1,234.56"

    def test_unknown_locale_raises(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            format_currency(1, locale="xx-YY")

    def test_negative_digits_rejected(self):
        with pytest.raises(ValidationError):
            format_currency(1, minimum_fraction_digits=-1)

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            format_currency(1, style="currency")


class TestPresets:
    """Test format_cny, format_usd and format_eur."""

    def test_cny(self):
        assert format_cny(1234.56) == "¥1,234.56"

    def test_cny_pins_currency_and_locale(self):
        assert format_cny(1234.56, currency="USD", locale="en-US") == "¥1,234.56"

    def test_usd(self):
        assert format_usd(1234.56) == "$1,234.56"

    def test_usd_keeps_caller_locale(self):
        assert format_usd(1234.56, locale="en-GB") == "US$1,234.56"

    def test_eur(self):
        assert format_eur(1234.56) == "1.234,56 €"

    def test_preset_accepts_fraction_digits(self):
        assert format_usd(1234.5, {"minimum_fraction_digits": 3}) == "$1,234.500"
