#!/usr/bin/env python3
"""
Money Primitive Type

Immutable amount + currency pair with the amount held in the currency's
smallest unit. Thin wrapper over the functional API in currency, arithmetic,
allocation, exchange and formatting.
"""

from dataclasses import dataclass

from .allocation import allocate, allocate_evenly
from .arithmetic import DecimalInput, multiply
from .currency import to_display_amount, to_display_string, to_smallest_unit
from .exchange import convert
from .formatting import DEFAULT_LOCALE, format_amount


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in a currency's smallest unit.

    Supports positive (income) and negative (expense) amounts. Arithmetic
    between different currencies is rejected.

    Examples:
        >>> price = Money.from_display("19.99", "USD")
        >>> price.amount
        1999
        >>> str(price)
        '$19.99'

        >>> Money(1000, "USD").allocate_evenly(3)
        [Money(amount=334, currency='USD'), Money(amount=333, currency='USD'), Money(amount=333, currency='USD')]

        >>> Money(1000, "JPY").convert_to("USD", 0.0067)
        Money(amount=670, currency='USD')
    """

    amount: int
    currency: str

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Money amount must be an integer in smallest units, got {self.amount!r}")

    @classmethod
    def from_display(cls, display_amount: DecimalInput, currency: str) -> "Money":
        """
        Create Money from a display amount like 19.99 or "19.99".

        Raises:
            InvalidCurrencyError: If the currency code is unknown
        """
        return cls(amount=to_smallest_unit(display_amount, currency), currency=currency)

    @classmethod
    def zero(cls, currency: str) -> "Money":
        """Zero in the given currency."""
        return cls(amount=0, currency=currency)

    def to_display_amount(self) -> float:
        """Display amount as a float (19.99)."""
        return to_display_amount(self.amount, self.currency)

    def to_display_string(self) -> str:
        """Display amount as a fixed-precision string ("19.99", "19.990", "1000")."""
        return to_display_string(self.amount, self.currency)

    def format(self, locale: str = DEFAULT_LOCALE) -> str:
        """Localized currency string ("$19.99")."""
        return format_amount(self.amount, self.currency, locale)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(amount=abs(self.amount), currency=self.currency)

    def allocate_evenly(self, parts: int) -> list["Money"]:
        """Split into `parts` values that sum exactly to this one."""
        return [Money(amount=a, currency=self.currency) for a in allocate_evenly(self.amount, parts)]

    def allocate(self, weights: list[DecimalInput]) -> list["Money"]:
        """Split by relative weights into values that sum exactly to this one."""
        return [Money(amount=a, currency=self.currency) for a in allocate(self.amount, weights)]

    def convert_to(self, currency: str, rate: DecimalInput) -> "Money":
        """Convert at `rate` units of `currency` per 1 unit of this currency."""
        return Money(amount=convert(self.amount, self.currency, currency, rate), currency=currency)

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} vs {other.currency}")

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects of the same currency."""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects of the same currency."""
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __mul__(self, factor: DecimalInput) -> "Money":
        """Multiply by a scalar, rounding half-up to the smallest unit."""
        return Money(amount=multiply(self.amount, factor), currency=self.currency)

    def __neg__(self) -> "Money":
        return Money(amount=-self.amount, currency=self.currency)

    def __lt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        """Format with the default locale."""
        return self.format()
