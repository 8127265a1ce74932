#!/usr/bin/env python3
"""
Currency Conversion

Converts smallest-unit amounts between currencies with an exchange rate applied
at display scale, so currencies with different exponents line up:

    1000 JPY at 0.0067 -> 1000 / 10^0 * 0.0067 * 10^2 -> 670 (USD cents)

Rates are supplied by the caller. ExchangeRates holds a snapshot in the usual
rate-API shape (1 base = X other) and derives cross rates from it; fetching and
refreshing snapshots is the caller's job.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from .arithmetic import MONEY_CONTEXT, DecimalInput, round_half_up, to_decimal
from .currency import get_exponent, smallest_unit_to_decimal
from .json_utils import read_json, write_json

logger = logging.getLogger(__name__)


class CurrencyConversionError(Exception):
    """Raised when no exchange rate is available for a currency pair."""

    def __init__(self, from_currency: str, to_currency: str, reason: str):
        super().__init__(f"Failed to convert {from_currency} to {to_currency}: {reason}")
        self.from_currency = from_currency
        self.to_currency = to_currency
        self.reason = reason


def _parse_timestamp(stamp: str) -> datetime:
    # fromisoformat only accepts a "Z" suffix from Python 3.11
    if stamp.endswith("Z"):
        stamp = stamp[:-1] + "+00:00"
    return datetime.fromisoformat(stamp)


def convert(amount: int, from_currency: str, to_currency: str, rate: DecimalInput) -> int:
    """
    Convert an amount between currencies using an exchange rate.

    Args:
        amount: Amount in smallest unit of the source currency
        from_currency: Source currency code
        to_currency: Target currency code
        rate: How many units of to_currency per 1 unit of from_currency

    Returns:
        Amount in smallest unit of the target currency. Identical currencies
        return `amount` unchanged and ignore `rate`.

    Raises:
        InvalidCurrencyError: If either currency code is unknown

    Example:
        convert(1000, "JPY", "USD", 0.0067) -> 670  # $6.70
    """
    if from_currency == to_currency:
        return amount

    display_amount = smallest_unit_to_decimal(amount, get_exponent(from_currency))
    converted = MONEY_CONTEXT.multiply(display_amount, to_decimal(rate))
    to_multiplier = MONEY_CONTEXT.power(Decimal(10), get_exponent(to_currency))
    return round_half_up(MONEY_CONTEXT.multiply(converted, to_multiplier))


@dataclass(frozen=True)
class ExchangeRates:
    """
    Exchange-rate snapshot relative to one base currency.

    rates[code] is how many units of `code` one unit of `base_currency` buys.
    The base currency itself is implicitly 1.
    """

    base_currency: str
    rates: dict[str, Decimal] = field(default_factory=dict, hash=False)
    fetched_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExchangeRates":
        """
        Build a snapshot from a rate-API style payload.

        Expects {"base": "USD", "rates": {"EUR": 0.92, ...}} with an optional
        ISO-8601 "fetched_at" (or "date") timestamp.
        """
        base = data.get("base") or data.get("base_currency")
        if not base:
            raise ValueError("Exchange rate data is missing its base currency")

        rates = {code: to_decimal(value) for code, value in data.get("rates", {}).items()}
        for code, value in rates.items():
            if value <= 0:
                raise ValueError(f"Exchange rate for {code} must be positive, got {value}")

        stamp = data.get("fetched_at") or data.get("date")
        fetched_at = _parse_timestamp(stamp) if stamp else None
        if fetched_at is not None and fetched_at.tzinfo is None:
            fetched_at = fetched_at.replace(tzinfo=timezone.utc)

        return cls(base_currency=base, rates=rates, fetched_at=fetched_at)

    @classmethod
    def load(cls, filepath: str | Path) -> "ExchangeRates":
        """Load a snapshot saved with save() or downloaded from a rate API."""
        snapshot = cls.from_dict(read_json(filepath))
        logger.info(f"Loaded {len(snapshot.rates)} exchange rates (base {snapshot.base_currency}) from {filepath}")
        return snapshot

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the same shape from_dict() accepts."""
        return {
            "base": self.base_currency,
            "rates": {code: str(value) for code, value in self.rates.items()},
            "fetched_at": self.fetched_at.isoformat() if self.fetched_at else None,
        }

    def save(self, filepath: str | Path) -> None:
        """Write the snapshot as pretty-printed JSON."""
        write_json(filepath, self.to_dict())

    def is_stale(self, max_age: timedelta, now: datetime | None = None) -> bool:
        """True when the snapshot is older than max_age, or has no timestamp."""
        if self.fetched_at is None:
            return True
        now = now or datetime.now(timezone.utc)
        return now - self.fetched_at > max_age

    def _rate_from_base(self, code: str) -> Decimal | None:
        if code == self.base_currency:
            return Decimal(1)
        return self.rates.get(code)

    def get_rate(self, from_currency: str, to_currency: str) -> Decimal:
        """
        Units of to_currency per 1 unit of from_currency.

        Raises:
            CurrencyConversionError: If either currency has no rate in the snapshot
        """
        if from_currency == to_currency:
            return Decimal(1)

        from_rate = self._rate_from_base(from_currency)
        if from_rate is None:
            raise CurrencyConversionError(from_currency, to_currency, f"No exchange rate available for {from_currency}")
        to_rate = self._rate_from_base(to_currency)
        if to_rate is None:
            raise CurrencyConversionError(from_currency, to_currency, f"No exchange rate available for {to_currency}")

        return MONEY_CONTEXT.divide(to_rate, from_rate)

    def convert(self, amount: int, from_currency: str, to_currency: str) -> int:
        """Convert using this snapshot's cross rate."""
        return convert(amount, from_currency, to_currency, self.get_rate(from_currency, to_currency))

    def convert_with_fallback(self, amount: int, from_currency: str, to_currency: str) -> int:
        """
        Best-effort conversion: falls back to a 1:1 rate when no rate is known.

        The 1:1 fallback still re-scales between exponents, so 1000 JPY becomes
        100000 USD cents rather than 1000.
        """
        try:
            return self.convert(amount, from_currency, to_currency)
        except CurrencyConversionError as e:
            logger.warning(f"Currency conversion failed, using 1:1 fallback: {e}")
            return convert(amount, from_currency, to_currency, 1)
