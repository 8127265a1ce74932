"""
Expense Tracker - Money Core

Currency-aware money arithmetic for a self-hosted expense tracker: amounts are
stored as integers in each currency's smallest unit, and every split, sum,
percentage and conversion preserves them exactly.

Domain Packages:
- core: Currency metadata, arithmetic, allocation, conversion, formatting, configuration
- analysis: Category and monthly breakdowns for dashboards
- cli: Command-line interface

Example Usage:
    from expenses.core import allocate_evenly, format_amount, to_smallest_unit

    cents = to_smallest_unit("19.99", "USD")   # 1999
    allocate_evenly(1000, 3)                   # [334, 333, 333]
    format_amount(1999, "USD")                 # "$19.99"
"""

__version__ = "0.3.0"
__author__ = "Expense Tracker Contributors"

from .core.allocation import allocate, allocate_evenly
from .core.config import Environment, get_config
from .core.currency import InvalidCurrencyError, get_exponent, to_display_string, to_smallest_unit
from .core.formatting import format_amount
from .core.money import Money

__all__ = [
    "Environment",
    "InvalidCurrencyError",
    "Money",
    "allocate",
    "allocate_evenly",
    "format_amount",
    "get_config",
    "get_exponent",
    "to_display_string",
    "to_smallest_unit",
]
