#!/usr/bin/env python3
"""Tests for currency metadata and representation conversion."""

from decimal import ROUND_HALF_UP, Decimal

import pytest

from expenses.core.currency import (
    CurrencyOption,
    InvalidCurrencyError,
    get_currency_codes,
    get_currency_info,
    get_currency_options,
    get_exponent,
    get_exponent_safe,
    is_valid_currency,
    to_display_amount,
    to_display_string,
    to_smallest_unit,
)


class TestCurrencyMetadata:
    """Test ISO 4217 exponent lookups."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "code,expected",
        [("USD", 2), ("EUR", 2), ("SAR", 2), ("JPY", 0), ("KRW", 0), ("KWD", 3), ("BHD", 3), ("CLF", 4)],
    )
    def test_get_exponent(self, code, expected):
        """Test exponents across 0, 2, 3 and 4 digit currencies."""
        assert get_exponent(code) == expected

    @pytest.mark.currency
    def test_get_exponent_unknown_raises(self):
        """Test strict lookup fails for unknown codes."""
        with pytest.raises(InvalidCurrencyError) as exc_info:
            get_exponent("XYZ")

        assert exc_info.value.code == "XYZ"
        assert "XYZ" in str(exc_info.value)

    @pytest.mark.currency
    def test_lookup_is_case_sensitive(self):
        """Test lowercase codes are not silently accepted."""
        assert not is_valid_currency("usd")
        with pytest.raises(InvalidCurrencyError):
            get_exponent("usd")

    @pytest.mark.currency
    def test_get_exponent_safe(self):
        """Test safe lookup falls back to the default."""
        assert get_exponent_safe("JPY") == 0
        assert get_exponent_safe("XYZ") == 2
        assert get_exponent_safe("XYZ", default=3) == 3

    @pytest.mark.currency
    def test_is_valid_currency(self):
        """Test existence checks never raise."""
        assert is_valid_currency("USD") is True
        assert is_valid_currency("KWD") is True
        assert is_valid_currency("XYZ") is False
        assert is_valid_currency("") is False

    @pytest.mark.currency
    def test_get_currency_info(self):
        """Test full table entries."""
        info = get_currency_info("KWD")
        assert info is not None
        assert info.digits == 3
        assert info.number == "414"
        assert info.name == "Kuwaiti Dinar"
        assert get_currency_info("XYZ") is None


class TestCurrencyOptions:
    """Test currency enumeration for pickers."""

    @pytest.mark.currency
    def test_options_follow_table_order(self):
        """Test options keep ISO table order and match the code list."""
        options = get_currency_options()
        codes = get_currency_codes()

        assert [o.value for o in options] == codes
        assert codes[0] == "AED"
        assert len(set(codes)) == len(codes)

    @pytest.mark.currency
    def test_option_fields(self):
        """Test label, name and digits of an option."""
        usd = next(o for o in get_currency_options() if o.value == "USD")
        assert usd == CurrencyOption(value="USD", label="USD - US Dollar", name="US Dollar", digits=2)

    @pytest.mark.currency
    def test_all_exponents_non_negative(self):
        """Test every table entry has a usable exponent."""
        assert all(o.digits >= 0 for o in get_currency_options())


class TestToSmallestUnit:
    """Test display amount -> smallest unit conversion."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "display,currency,expected",
        [
            (19.99, "USD", 1999),
            ("19.99", "USD", 1999),
            (300, "SAR", 30000),
            (1000, "JPY", 1000),
            ("1.5", "KWD", 1500),
            ("19.990", "KWD", 19990),
            (Decimal("0.01"), "EUR", 1),
            ("-12.34", "USD", -1234),
            (" 12.34 ", "USD", 1234),
        ],
        ids=["float", "string", "sar_integer", "jpy", "kwd", "kwd_trailing_zero", "decimal", "negative", "padded"],
    )
    def test_to_smallest_unit(self, display, currency, expected):
        """Test conversions across input types and exponents."""
        assert to_smallest_unit(display, currency) == expected

    @pytest.mark.currency
    def test_rounds_half_up(self):
        """Test sub-unit input rounds half-up (away from zero on ties)."""
        assert to_smallest_unit("19.995", "USD") == 2000
        assert to_smallest_unit("19.994", "USD") == 1999
        assert to_smallest_unit("-19.995", "USD") == -2000
        assert to_smallest_unit("999.5", "JPY") == 1000

    @pytest.mark.currency
    def test_float_input_avoids_binary_error(self):
        """Test floats are read as their decimal text, not binary approximation."""
        # Naive float math gives 100.49999... and rounds down
        assert to_smallest_unit(1.005, "USD") == 101
        assert to_smallest_unit(0.1 + 0.2, "USD") == 30

    @pytest.mark.currency
    def test_unknown_currency_raises(self):
        """Test conversion propagates InvalidCurrencyError."""
        with pytest.raises(InvalidCurrencyError):
            to_smallest_unit("10.00", "XYZ")

    @pytest.mark.currency
    @pytest.mark.parametrize("bad_input", ["abc", "", "NaN", "Infinity", float("nan")])
    def test_invalid_amount_raises(self, bad_input):
        """Test malformed or non-finite amounts are rejected."""
        with pytest.raises(ValueError):
            to_smallest_unit(bad_input, "USD")


class TestDisplayConversion:
    """Test smallest unit -> display conversions."""

    @pytest.mark.currency
    def test_to_display_amount(self):
        """Test float display amounts."""
        assert to_display_amount(1999, "USD") == 19.99
        assert to_display_amount(1000, "JPY") == 1000
        assert to_display_amount(19990, "KWD") == 19.99
        assert to_display_amount(-5, "USD") == -0.05

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "amount,currency,expected",
        [
            (1999, "USD", "19.99"),
            (100, "USD", "1.00"),
            (5, "USD", "0.05"),
            (0, "USD", "0.00"),
            (-4599, "USD", "-45.99"),
            (1000, "JPY", "1000"),
            (19990, "KWD", "19.990"),
            (12345, "CLF", "1.2345"),
        ],
    )
    def test_to_display_string(self, amount, currency, expected):
        """Test fixed-precision display strings."""
        assert to_display_string(amount, currency) == expected

    @pytest.mark.currency
    @pytest.mark.parametrize("currency", ["USD", "JPY", "KWD", "CLF"])
    @pytest.mark.parametrize("display", ["0", "0.5", "19.99", "1234.567", "-7.25"])
    def test_round_trip_within_currency_precision(self, display, currency):
        """Test display -> smallest unit -> display keeps the value at the currency's precision."""
        units = to_smallest_unit(display, currency)
        exponent = get_exponent(currency)
        expected = Decimal(display).quantize(Decimal(10) ** -exponent, rounding=ROUND_HALF_UP)

        assert Decimal(to_display_string(units, currency)) == expected
        assert to_display_amount(units, currency) == float(expected)

    @pytest.mark.currency
    def test_display_unknown_currency_raises(self):
        """Test display conversions are strict about currency codes."""
        with pytest.raises(InvalidCurrencyError):
            to_display_string(100, "XYZ")
        with pytest.raises(InvalidCurrencyError):
            to_display_amount(100, "XYZ")
