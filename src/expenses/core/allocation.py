#!/usr/bin/env python3
"""
Lossless Allocation

Splits one smallest-unit amount into parts whose sum is exactly the original.
Naive division loses or invents minor units ($10.00 / 3 -> 3 x $3.33 = $9.99);
both algorithms here push the rounding difference into specific buckets instead.
"""

from collections.abc import Sequence
from decimal import Decimal

from .arithmetic import MONEY_CONTEXT, DecimalInput, DivisionByZeroError, round_half_up, to_decimal


def allocate_evenly(amount: int, parts: int) -> list[int]:
    """
    Split an amount evenly into N parts, front-loading the remainder.

    The first `remainder` parts get one extra unit, so every part differs from
    every other by at most 1 and the parts sum exactly to `amount`.

    Example:
        allocate_evenly(1000, 3) -> [334, 333, 333]

    Args:
        amount: Total amount in smallest units
        parts: Number of parts (positive)

    Returns:
        List of `parts` integers summing to `amount`

    Raises:
        ValueError: If parts is not a positive integer
    """
    if parts <= 0:
        raise ValueError("Parts must be a positive integer")
    if parts == 1:
        return [amount]

    base = amount // parts
    remainder = amount - base * parts

    return [base + 1 if i < remainder else base for i in range(parts)]


def allocate(amount: int, weights: Sequence[DecimalInput]) -> list[int]:
    """
    Split an amount by relative weights.

    Every bucket but the last gets its proportional share rounded half-up; the
    last bucket gets whatever remains, which keeps the total exact.

    Examples:
        allocate(1000, [1, 1, 2]) -> [250, 250, 500]
        allocate(1000, [1, 2]) -> [333, 667]

    Args:
        amount: Total amount in smallest units
        weights: Relative weights (ints, floats, Decimals or decimal strings)

    Returns:
        List with one integer per weight, summing to `amount`

    Raises:
        DivisionByZeroError: If the weights sum to zero
    """
    if not weights:
        return []
    if len(weights) == 1:
        return [amount]

    weight_values = [to_decimal(weight) for weight in weights]
    total_weight = Decimal(0)
    for weight in weight_values:
        total_weight = MONEY_CONTEXT.add(total_weight, weight)
    if total_weight.is_zero():
        raise DivisionByZeroError("Weights must sum to a non-zero number")

    amount_dec = to_decimal(amount)
    results: list[int] = []
    remaining = amount

    for weight in weight_values[:-1]:
        share = round_half_up(MONEY_CONTEXT.divide(MONEY_CONTEXT.multiply(amount_dec, weight), total_weight))
        results.append(share)
        remaining -= share

    results.append(remaining)
    return results
