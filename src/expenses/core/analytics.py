#!/usr/bin/env python3
"""
Analytical Helpers

Grouping and period-over-period helpers for dashboards and reports. All
amounts are smallest-unit integers in a single currency.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

from .arithmetic import average, is_positive, percentage, sum_amounts

T = TypeVar("T")


@dataclass(frozen=True)
class AmountChange:
    """Change between two periods: absolute units and percent of the previous value."""

    absolute: int
    percentage: float


def _group(items: Iterable[T], get_key: Callable[[T], str], get_amount: Callable[[T], int]) -> dict[str, list[int]]:
    groups: dict[str, list[int]] = {}
    for item in items:
        groups.setdefault(get_key(item), []).append(get_amount(item))
    return groups


def group_and_sum(items: Iterable[T], get_key: Callable[[T], str], get_amount: Callable[[T], int]) -> dict[str, int]:
    """
    Group items by key and sum their amounts.

    Keys keep first-seen order.

    Example:
        group_and_sum(expenses, lambda e: e["category"], lambda e: e["amount"])
        -> {"Food": 4599, "Travel": 12000}
    """
    return {key: sum_amounts(amounts) for key, amounts in _group(items, get_key, get_amount).items()}


def group_and_average(items: Iterable[T], get_key: Callable[[T], str], get_amount: Callable[[T], int]) -> dict[str, int]:
    """Group items by key and average their amounts (rounded half-up)."""
    return {key: average(amounts) for key, amounts in _group(items, get_key, get_amount).items()}


def change(current: int, previous: int) -> AmountChange:
    """
    Change from a previous value to the current one.

    When previous is zero the percentage is 100 for any increase and 0 otherwise.
    """
    absolute = current - previous
    if previous == 0:
        pct = 100.0 if is_positive(current) else 0.0
    else:
        pct = percentage(absolute, previous)
    return AmountChange(absolute=absolute, percentage=pct)
