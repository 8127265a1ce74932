#!/usr/bin/env python3
"""
Currency Metadata and Representation Conversion

ISO 4217 lookups and conversions between the display representation a person
types or reads ("19.99") and the integer smallest-unit representation used for
storage and arithmetic (1999).

Currency Exponents:
- USD, EUR, SAR: 2 digits (cents, halalas)
- JPY, KRW: 0 digits (no subunit)
- KWD, BHD: 3 digits (fils)
- CLF, UYW: 4 digits

Key Principles:
- Exponent lookup lives here only; every other module asks this one
- Strict lookups raise InvalidCurrencyError, "safe" lookups fall back to a default
- Scaling by powers of ten is done in Decimal, rounding half-up at the end
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache

from .arithmetic import MONEY_CONTEXT, DecimalInput, round_half_up, to_decimal
from .json_utils import read_package_json

DEFAULT_EXPONENT = 2


class InvalidCurrencyError(ValueError):
    """Raised when a currency code is not in the ISO 4217 table."""

    def __init__(self, code: str):
        super().__init__(f"Invalid ISO 4217 currency code: {code}")
        self.code = code


@dataclass(frozen=True)
class CurrencyInfo:
    """One ISO 4217 table entry."""

    code: str
    number: str
    digits: int
    name: str


@dataclass(frozen=True)
class CurrencyOption:
    """Currency choice for pickers: value is the code, label is "USD - US Dollar"."""

    value: str
    label: str
    name: str
    digits: int


@lru_cache(maxsize=1)
def _currency_table() -> dict[str, CurrencyInfo]:
    entries = read_package_json("expenses.core.data", "iso4217.json")
    return {
        entry["code"]: CurrencyInfo(
            code=entry["code"],
            number=entry["number"],
            digits=int(entry["digits"]),
            name=entry["currency"],
        )
        for entry in entries
    }


# Metadata lookups


def get_currency_info(code: str) -> CurrencyInfo | None:
    """Get the ISO 4217 entry for a code, or None if unknown."""
    return _currency_table().get(code)


def get_exponent(currency: str) -> int:
    """
    Get the number of decimal places for a currency.

    Args:
        currency: ISO 4217 currency code

    Returns:
        Number of decimal places (USD=2, JPY=0, KWD=3)

    Raises:
        InvalidCurrencyError: If the code is not in the ISO 4217 table
    """
    info = get_currency_info(currency)
    if info is None:
        raise InvalidCurrencyError(currency)
    return info.digits


def get_exponent_safe(currency: str, default: int = DEFAULT_EXPONENT) -> int:
    """Get the exponent for a currency, or `default` if the code is unknown."""
    info = get_currency_info(currency)
    return info.digits if info is not None else default


def is_valid_currency(code: str) -> bool:
    """Check if a string is a known ISO 4217 currency code."""
    return get_currency_info(code) is not None


def get_currency_codes() -> list[str]:
    """All known currency codes, in ISO table order."""
    return list(_currency_table())


def get_currency_options() -> list[CurrencyOption]:
    """All currencies as picker options, in ISO table order."""
    return [
        CurrencyOption(
            value=info.code,
            label=f"{info.code} - {info.name}",
            name=info.name,
            digits=info.digits,
        )
        for info in _currency_table().values()
    ]


# Conversion between representations


def _scale(exponent: int) -> Decimal:
    return MONEY_CONTEXT.power(Decimal(10), exponent)


def to_smallest_unit(display_amount: DecimalInput, currency: str) -> int:
    """
    Convert a display amount to the smallest unit for storage.

    Accepts a number or a decimal string; strings are parsed without going
    through a float so user-entered text keeps its exact value.

    Examples:
        to_smallest_unit(19.99, "USD") -> 1999
        to_smallest_unit("19.995", "USD") -> 2000
        to_smallest_unit(300, "SAR") -> 30000
        to_smallest_unit("1.5", "KWD") -> 1500

    Raises:
        InvalidCurrencyError: If the currency code is unknown
        ValueError: If display_amount is not a finite decimal number
    """
    exponent = get_exponent(currency)
    return round_half_up(MONEY_CONTEXT.multiply(to_decimal(display_amount), _scale(exponent)))


def smallest_unit_to_decimal(smallest_unit: DecimalInput, exponent: int) -> Decimal:
    """Exact display-scale Decimal for a smallest-unit amount at a given exponent."""
    return MONEY_CONTEXT.divide(to_decimal(smallest_unit), _scale(exponent))


def to_display_amount(smallest_unit: DecimalInput, currency: str) -> float:
    """
    Convert a smallest-unit amount to a display amount for further computation.

    Example:
        to_display_amount(1999, "USD") -> 19.99

    For text, prefer to_display_string which never passes through a float.
    """
    return float(smallest_unit_to_decimal(smallest_unit, get_exponent(currency)))


def decimal_to_string(value: Decimal, exponent: int) -> str:
    """Render a display-scale Decimal with exactly `exponent` fractional digits."""
    return format(value.quantize(_scale(-exponent), rounding=ROUND_HALF_UP, context=MONEY_CONTEXT), "f")


def to_display_string(smallest_unit: DecimalInput, currency: str) -> str:
    """
    Convert a smallest-unit amount to a display string with the currency's decimal places.

    Examples:
        to_display_string(1999, "USD") -> "19.99"
        to_display_string(19990, "KWD") -> "19.990"
        to_display_string(1000, "JPY") -> "1000"
    """
    exponent = get_exponent(currency)
    return decimal_to_string(smallest_unit_to_decimal(smallest_unit, exponent), exponent)
