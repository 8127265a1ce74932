#!/usr/bin/env python3
"""
Money Arithmetic

Arithmetic, percentage and comparison helpers for amounts held in a currency's
smallest unit (cents, yen, fils, ...).

Key Principles:
- Amounts in and out are plain integers in the smallest unit
- Intermediate values are Decimals under MONEY_CONTEXT (20 significant digits,
  round half-up), never binary floats
- Rounding back to an integer happens once, at the final step
"""

import numbers
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Union

# Explicit context for every money operation; the process-wide default context is never touched.
MONEY_CONTEXT = Context(prec=20, rounding=ROUND_HALF_UP)

DecimalInput = Union[int, float, str, Decimal]

_ONE_HUNDRED = Decimal(100)


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a money operation would divide by zero."""

    pass


def to_decimal(value: DecimalInput) -> Decimal:
    """
    Convert a numeric or decimal-string input to an exact Decimal.

    Floats go through their shortest string form so that 0.0067 means the decimal
    0.0067 rather than its binary approximation.

    Args:
        value: int, float, Decimal or decimal string like "19.99"

    Returns:
        Finite Decimal value

    Raises:
        ValueError: If the value is not a finite decimal number
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValueError(f"Invalid decimal amount: {value!r}")
    elif isinstance(value, numbers.Integral):
        result = Decimal(int(value))
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid decimal amount: {value!r}") from e
    else:
        raise ValueError(f"Invalid decimal amount: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return result


def round_half_up(value: Decimal) -> int:
    """Round a Decimal to the nearest integer, ties away from zero."""
    return int(value.to_integral_value(rounding=ROUND_HALF_UP, context=MONEY_CONTEXT))


# Aggregates


def sum_amounts(amounts: Iterable[DecimalInput]) -> int:
    """
    Sum amounts exactly.

    Example:
        sum_amounts([100, 200, 300]) -> 600
    """
    total = Decimal(0)
    for amount in amounts:
        total = MONEY_CONTEXT.add(total, to_decimal(amount))
    return round_half_up(total)


def average(amounts: Iterable[DecimalInput]) -> int:
    """
    Average of amounts, rounded half-up to the nearest smallest unit.

    Returns 0 for empty input.
    """
    values = [to_decimal(amount) for amount in amounts]
    if not values:
        return 0

    total = Decimal(0)
    for value in values:
        total = MONEY_CONTEXT.add(total, value)
    return round_half_up(MONEY_CONTEXT.divide(total, Decimal(len(values))))


def max_amount(amounts: Iterable[int]) -> int:
    """Largest amount, or 0 for empty input."""
    return max(amounts, default=0)


def min_amount(amounts: Iterable[int]) -> int:
    """Smallest amount, or 0 for empty input."""
    return min(amounts, default=0)


# Scalar operations


def multiply(amount: DecimalInput, factor: DecimalInput) -> int:
    """
    Multiply an amount by a factor (quantities, scaling).

    Example:
        multiply(333, 1.5) -> 500  # 499.5 rounds half-up
    """
    return round_half_up(MONEY_CONTEXT.multiply(to_decimal(amount), to_decimal(factor)))


def divide(amount: DecimalInput, divisor: DecimalInput) -> int:
    """
    Divide an amount, rounding half-up.

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    divisor_dec = to_decimal(divisor)
    if divisor_dec.is_zero():
        raise DivisionByZeroError("Cannot divide by zero")
    return round_half_up(MONEY_CONTEXT.divide(to_decimal(amount), divisor_dec))


def subtract(minuend: DecimalInput, *subtrahends: DecimalInput) -> int:
    """
    Subtract any number of amounts from a base amount.

    Example:
        subtract(1000, 250, 125) -> 625
    """
    result = to_decimal(minuend)
    for subtrahend in subtrahends:
        result = MONEY_CONTEXT.subtract(result, to_decimal(subtrahend))
    return round_half_up(result)


# Percentages


def _ratio_percent(amount: DecimalInput, total: DecimalInput) -> Decimal:
    return MONEY_CONTEXT.multiply(MONEY_CONTEXT.divide(to_decimal(amount), to_decimal(total)), _ONE_HUNDRED)


def percentage(amount: DecimalInput, total: DecimalInput, decimal_places: int = 2) -> float:
    """
    Percentage that amount is of total.

    Args:
        amount: The part amount
        total: The total amount
        decimal_places: Decimal places kept in the result (default: 2)

    Returns:
        Percentage such as 25.5 for 25.5%, or 0 when total is zero
    """
    if to_decimal(total).is_zero():
        return 0.0
    quantum = Decimal(1).scaleb(-decimal_places, context=MONEY_CONTEXT)
    return float(_ratio_percent(amount, total).quantize(quantum, rounding=ROUND_HALF_UP, context=MONEY_CONTEXT))


def percentage_int(amount: DecimalInput, total: DecimalInput) -> int:
    """Whole-number percentage for charts and progress bars; 0 when total is zero."""
    if to_decimal(total).is_zero():
        return 0
    return round_half_up(_ratio_percent(amount, total))


def percentage_of(amount: DecimalInput, percent: DecimalInput) -> int:
    """
    Amount corresponding to a percentage of a base amount.

    Example:
        percentage_of(1000, 15) -> 150
    """
    scaled = MONEY_CONTEXT.multiply(to_decimal(amount), to_decimal(percent))
    return round_half_up(MONEY_CONTEXT.divide(scaled, _ONE_HUNDRED))


# Comparison helpers


def equals(a: DecimalInput, b: DecimalInput) -> bool:
    """Check if two amounts are equal."""
    return to_decimal(a) == to_decimal(b)


def greater_than(a: DecimalInput, b: DecimalInput) -> bool:
    """Check if amount a is greater than amount b."""
    return to_decimal(a) > to_decimal(b)


def less_than(a: DecimalInput, b: DecimalInput) -> bool:
    """Check if amount a is less than amount b."""
    return to_decimal(a) < to_decimal(b)


def is_zero(amount: DecimalInput) -> bool:
    """Check if an amount is zero."""
    return to_decimal(amount).is_zero()


def is_positive(amount: DecimalInput) -> bool:
    """Check if an amount is strictly greater than zero."""
    return to_decimal(amount) > 0


def is_negative(amount: DecimalInput) -> bool:
    """Check if an amount is strictly less than zero."""
    return to_decimal(amount) < 0

