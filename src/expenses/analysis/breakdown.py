#!/usr/bin/env python3
"""
Expense Breakdown Analysis

Builds the category and monthly breakdowns shown on the dashboard from stored
expense records. Amounts stay smallest-unit integers end to end; an expense
tagged with several categories is split across them with allocate_evenly so
category totals still add up to the overall total.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Any

import pandas as pd

from ..core.allocation import allocate_evenly
from ..core.arithmetic import average, percentage, sum_amounts
from ..core.dates import to_month_key
from ..core.formatting import DEFAULT_LOCALE, format_amount

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"

EXPENSE_COLUMNS = ["amount", "currency", "categories", "expense_date", "merchant"]


@dataclass
class BreakdownConfig:
    """Options for building breakdowns."""

    currency: str = "USD"
    locale: str = DEFAULT_LOCALE
    uncategorized_label: str = UNCATEGORIZED


def _reporting_amount(record: dict[str, Any], currency: str) -> int | None:
    """Amount in the reporting currency, preferring the stored base amount."""
    if record.get("currency") == currency:
        return int(record["amount"])
    base_amount = record.get("base_amount")
    if record.get("base_currency") == currency and base_amount is not None and pd.notna(base_amount):
        return int(base_amount)
    return None


def expenses_to_dataframe(records: Iterable[dict[str, Any]], config: BreakdownConfig | None = None) -> pd.DataFrame:
    """
    Convert expense records to a DataFrame in the reporting currency.

    Each record needs amount (smallest unit), currency and expense_date; records
    in another currency are used through base_amount/base_currency when those
    match the reporting currency and skipped otherwise.

    Args:
        records: Expense dictionaries
        config: Reporting options (default: USD, en-US)

    Returns:
        DataFrame with amount, currency, categories, expense_date, merchant, month
    """
    config = config or BreakdownConfig()
    rows = []
    skipped = 0

    for record in records:
        amount = _reporting_amount(record, config.currency)
        if amount is None:
            skipped += 1
            continue

        expense_date = record["expense_date"]
        if isinstance(expense_date, str):
            expense_date = date.fromisoformat(expense_date[:10])

        categories = record.get("categories")
        if isinstance(categories, str):
            categories = [c.strip() for c in categories.split(";") if c.strip()]
        elif not isinstance(categories, (list, tuple)):
            categories = []

        rows.append(
            {
                "amount": amount,
                "currency": config.currency,
                "categories": list(categories),
                "expense_date": expense_date,
                "merchant": record.get("merchant"),
                "month": to_month_key(expense_date),
            }
        )

    if skipped:
        logger.warning("Skipped %d expenses with no amount in %s", skipped, config.currency)

    df = pd.DataFrame(rows, columns=EXPENSE_COLUMNS + ["month"])
    df["amount"] = df["amount"].astype("int64")
    return df


def explode_categories(df: pd.DataFrame, uncategorized_label: str = UNCATEGORIZED) -> pd.DataFrame:
    """
    One row per (expense, category) with the amount split evenly across categories.

    The split uses allocate_evenly, so the exploded amounts sum to the original total.
    """
    rows = []
    for record in df.to_dict("records"):
        categories = record["categories"] or [uncategorized_label]
        for category, share in zip(categories, allocate_evenly(int(record["amount"]), len(categories))):
            rows.append({**record, "category": category, "amount": share})

    exploded = pd.DataFrame(rows, columns=list(df.columns) + ["category"])
    exploded["amount"] = exploded["amount"].astype("int64")
    return exploded


def category_breakdown(df: pd.DataFrame, config: BreakdownConfig | None = None) -> pd.DataFrame:
    """
    Totals per category, largest first.

    Columns: category, total, count, average, share (percent of the overall
    total, 2 decimals), formatted (localized total).
    """
    config = config or BreakdownConfig()
    exploded = explode_categories(df, config.uncategorized_label)

    if exploded.empty:
        return pd.DataFrame(columns=["category", "total", "count", "average", "share", "formatted"])

    grouped = exploded.groupby("category", sort=False)["amount"]
    breakdown = pd.DataFrame(
        {
            "total": grouped.agg(sum_amounts),
            "count": grouped.size(),
            "average": grouped.agg(average),
        }
    ).reset_index()

    overall = sum_amounts(breakdown["total"])
    breakdown["share"] = [percentage(total, overall) for total in breakdown["total"]]
    breakdown["formatted"] = [format_amount(int(total), config.currency, config.locale) for total in breakdown["total"]]

    breakdown = breakdown.sort_values(["total", "category"], ascending=[False, True], kind="stable")
    logger.info("Built breakdown for %d categories (%d expenses)", len(breakdown), len(df))
    return breakdown.reset_index(drop=True)


def monthly_totals(df: pd.DataFrame, config: BreakdownConfig | None = None) -> pd.DataFrame:
    """
    Totals per "YYYY-MM" month in chronological order.

    Columns: month, total, count, formatted.
    """
    config = config or BreakdownConfig()
    if df.empty:
        return pd.DataFrame(columns=["month", "total", "count", "formatted"])

    grouped = df.groupby("month", sort=True)["amount"]
    monthly = pd.DataFrame({"total": grouped.agg(sum_amounts), "count": grouped.size()}).reset_index()
    monthly["formatted"] = [format_amount(int(total), config.currency, config.locale) for total in monthly["total"]]
    return monthly
