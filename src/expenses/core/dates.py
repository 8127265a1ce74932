#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for expense dates and the
"YYYY-MM" month keys used to group monthly totals.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

_MONTH_KEY = re.compile(r"^(\d{4})-(\d{1,2})$")


def to_month_key(value: date) -> str:
    """
    Format a date as a month grouping key.

    Example:
        to_month_key(date(2024, 3, 15)) -> "2024-03"
    """
    return f"{value.year:04d}-{value.month:02d}"


def from_month_key(month_key: str) -> date:
    """
    Parse a month key back to the first day of that month.

    Raises:
        ValueError: If the key is not in "YYYY-MM" format
    """
    match = _MONTH_KEY.match(month_key.strip())
    if not match:
        raise ValueError(f'Invalid month key format: "{month_key}". Expected "YYYY-MM"')

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f'Invalid month key format: "{month_key}". Month must be 01-12')
    return date(year, month, 1)


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def from_month_key(cls, month_key: str) -> "FinancialDate":
        """First day of the month named by a "YYYY-MM" key."""
        return cls(date=from_month_key(month_key))

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def to_month_key(self) -> str:
        """Format as YYYY-MM."""
        return to_month_key(self.date)

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()
