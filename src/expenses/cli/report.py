#!/usr/bin/env python3
"""
Breakdown CLI - Expense Report Commands

Summarizes an expense export (CSV) by category and month.

Expected CSV columns: amount (smallest unit), currency, expense_date (YYYY-MM-DD),
and optionally categories (";"-separated), merchant, base_amount, base_currency.
"""

from pathlib import Path

import click
import pandas as pd

from ..analysis import BreakdownConfig, category_breakdown, expenses_to_dataframe, monthly_totals
from ..core.arithmetic import sum_amounts
from ..core.config import get_config
from ..core.formatting import format_amount

REQUIRED_COLUMNS = {"amount", "currency", "expense_date"}


@click.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--currency", help="Reporting currency (defaults to configured currency)")
@click.option("--locale", help="Locale for formatted totals (defaults to configured locale)")
@click.option("--monthly", is_flag=True, help="Also show monthly totals")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the category table as CSV")
@click.pass_context
def breakdown(
    ctx: click.Context,
    csv_file: Path,
    currency: str | None,
    locale: str | None,
    monthly: bool,
    output: Path | None,
) -> None:
    """
    Show per-category totals and shares for an expense export.

    Examples:
      expenses breakdown expenses.csv
      expenses breakdown expenses.csv --currency EUR --locale de-DE --monthly
    """
    settings = ctx.obj["config"] if ctx.obj and "config" in ctx.obj else get_config()
    report_config = BreakdownConfig(
        currency=currency or settings.money.default_currency,
        locale=locale or settings.money.locale,
    )

    raw = pd.read_csv(csv_file, dtype={"categories": str, "merchant": str})
    missing = REQUIRED_COLUMNS - set(raw.columns)
    if missing:
        raise click.ClickException(f"{csv_file} is missing columns: {', '.join(sorted(missing))}")

    try:
        df = expenses_to_dataframe(raw.to_dict("records"), report_config)
    except (KeyError, ValueError) as e:
        raise click.ClickException(f"Could not read expenses from {csv_file}: {e}") from e

    if df.empty:
        click.echo(f"No expenses in {report_config.currency} found in {csv_file}")
        return

    categories = category_breakdown(df, report_config)
    total = sum_amounts(df["amount"])

    click.echo(f"Expenses by category ({report_config.currency}):")
    for row in categories.to_dict("records"):
        click.echo(f"  {row['category']:<24} {row['formatted']:>16} {row['share']:>7.2f}%  ({row['count']})")
    click.echo(f"  {'Total':<24} {format_amount(total, report_config.currency, report_config.locale):>16}")

    if monthly:
        click.echo("\nMonthly totals:")
        for row in monthly_totals(df, report_config).to_dict("records"):
            click.echo(f"  {row['month']:<24} {row['formatted']:>16}  ({row['count']})")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        categories.to_csv(output, index=False)
        click.echo(f"\nWrote category breakdown to {output}")
