"""
Core Utilities Package

Money and currency arithmetic shared by expense ingestion, analytics and display.

This package provides:
- ISO 4217 metadata and display <-> smallest-unit conversion
- Exact Decimal arithmetic, percentages and comparisons on smallest-unit integers
- Lossless allocation (even and weighted splits that preserve the total)
- Currency conversion with caller-supplied exchange rates
- Locale-aware formatting
- Configuration management for environment-specific settings
"""

from .allocation import allocate, allocate_evenly
from .analytics import AmountChange, change, group_and_average, group_and_sum
from .arithmetic import (
    DivisionByZeroError,
    average,
    divide,
    equals,
    greater_than,
    is_negative,
    is_positive,
    is_zero,
    less_than,
    max_amount,
    min_amount,
    multiply,
    percentage,
    percentage_int,
    percentage_of,
    subtract,
    sum_amounts,
)
from .config import Config, Environment, get_config, reload_config
from .currency import (
    CurrencyInfo,
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
from .dates import FinancialDate, from_month_key, to_month_key
from .exchange import CurrencyConversionError, ExchangeRates, convert
from .formatting import FormattedParts, format_amount, format_parts
from .money import Money

__all__ = [
    "AmountChange",
    # Configuration
    "Config",
    "CurrencyConversionError",
    "CurrencyInfo",
    "CurrencyOption",
    "DivisionByZeroError",
    "Environment",
    "ExchangeRates",
    "FinancialDate",
    "FormattedParts",
    "InvalidCurrencyError",
    "Money",
    # Allocation
    "allocate",
    "allocate_evenly",
    # Arithmetic
    "average",
    "change",
    "convert",
    "divide",
    "equals",
    "format_amount",
    "format_parts",
    "from_month_key",
    "get_config",
    # Currency metadata
    "get_currency_codes",
    "get_currency_info",
    "get_currency_options",
    "get_exponent",
    "get_exponent_safe",
    "greater_than",
    "group_and_average",
    "group_and_sum",
    "is_negative",
    "is_positive",
    "is_valid_currency",
    "is_zero",
    "less_than",
    "max_amount",
    "min_amount",
    "multiply",
    "percentage",
    "percentage_int",
    "percentage_of",
    "reload_config",
    "subtract",
    "sum_amounts",
    "to_display_amount",
    "to_display_string",
    "to_month_key",
    "to_smallest_unit",
]
