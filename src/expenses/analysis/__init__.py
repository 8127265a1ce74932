"""
Expense Analysis Package

Dashboard aggregations built on the money core.

Key Components:
- breakdown: Category and monthly breakdowns from stored expenses (pandas)
"""

from .breakdown import (
    BreakdownConfig,
    category_breakdown,
    expenses_to_dataframe,
    explode_categories,
    monthly_totals,
)

__all__ = [
    "BreakdownConfig",
    "category_breakdown",
    "expenses_to_dataframe",
    "explode_categories",
    "monthly_totals",
]
