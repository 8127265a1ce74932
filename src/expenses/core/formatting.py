#!/usr/bin/env python3
"""
Locale-Aware Currency Formatting

Renders smallest-unit amounts as currency strings ("$19.99", "19,99 €") with
Babel's CLDR data. Formatting is a display concern: unknown currencies and
locales degrade to a plain "CODE 12.34" string instead of raising.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.numbers import UnknownCurrencyError, format_currency, get_currency_symbol, validate_currency

from .currency import decimal_to_string, get_exponent_safe, smallest_unit_to_decimal

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

# Literal separators between symbol and number. Some locales also group digits with
# "\xa0", so only the ends of the value are stripped.
_LITERAL_SPACES = " \xa0"


@dataclass(frozen=True)
class FormattedParts:
    """Formatted amount split for custom layouts."""

    symbol: str
    value: str
    full: str


def _parse_locale(locale: str) -> Locale:
    """Accept both BCP 47 ("en-US") and POSIX ("en_US") style tags."""
    return Locale.parse(locale.replace("-", "_"))


def _display_decimal(smallest_unit: int, currency: str) -> Decimal:
    return smallest_unit_to_decimal(smallest_unit, get_exponent_safe(currency))


def _fallback_value(smallest_unit: int, currency: str) -> str:
    return decimal_to_string(_display_decimal(smallest_unit, currency), get_exponent_safe(currency))


def _format_with_locale(smallest_unit: int, currency: str, locale: Locale) -> str:
    validate_currency(currency, locale)
    return format_currency(_display_decimal(smallest_unit, currency), currency, locale=locale)


def format_amount(smallest_unit: int, currency: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Format a smallest-unit amount as a localized currency string.

    Examples:
        format_amount(1999, "USD") -> "$19.99"
        format_amount(1000, "JPY") -> "¥1,000"
        format_amount(1999, "ZZZ") -> "ZZZ 19.99"

    Args:
        smallest_unit: Amount in smallest unit
        currency: ISO 4217 currency code
        locale: Locale tag (default: "en-US")

    Returns:
        Formatted string; never raises for unknown currencies or locales
    """
    try:
        return _format_with_locale(smallest_unit, currency, _parse_locale(locale))
    except (UnknownCurrencyError, UnknownLocaleError, ValueError) as e:
        logger.debug("Falling back to plain formatting for %s in %s: %s", currency, locale, e)
        return f"{currency} {_fallback_value(smallest_unit, currency)}"


def format_parts(smallest_unit: int, currency: str, locale: str = DEFAULT_LOCALE) -> FormattedParts:
    """
    Format an amount and split it into symbol and numeric value.

    Example:
        format_parts(123456, "USD") -> FormattedParts(symbol="$", value="1,234.56", full="$1,234.56")
    """
    try:
        parsed = _parse_locale(locale)
        full = _format_with_locale(smallest_unit, currency, parsed)
        symbol = get_currency_symbol(currency, locale=parsed)
    except (UnknownCurrencyError, UnknownLocaleError, ValueError) as e:
        logger.debug("Falling back to plain formatting for %s in %s: %s", currency, locale, e)
        value = _fallback_value(smallest_unit, currency)
        return FormattedParts(symbol=currency, value=value, full=f"{currency} {value}")

    value = full.replace(symbol, "", 1).strip(_LITERAL_SPACES)
    return FormattedParts(symbol=symbol, value=value, full=full)
