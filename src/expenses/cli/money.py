#!/usr/bin/env python3
"""
Money CLI - Conversion, Splitting and Formatting Commands

Amounts on the command line are smallest-unit integers unless a command says
otherwise (to-units takes a display amount like 19.99).
"""

from pathlib import Path

import click

from ..core.allocation import allocate, allocate_evenly
from ..core.arithmetic import DivisionByZeroError
from ..core.config import Config, get_config
from ..core.currency import InvalidCurrencyError, get_currency_options, to_smallest_unit
from ..core.exchange import CurrencyConversionError, ExchangeRates, convert
from ..core.formatting import format_amount


def _config(ctx: click.Context) -> Config:
    if ctx.obj and "config" in ctx.obj:
        return ctx.obj["config"]
    return get_config()


def _echo_parts(parts: list[int], currency: str, locale: str) -> None:
    for index, part in enumerate(parts, start=1):
        click.echo(f"  {index:>3}. {format_amount(part, currency, locale):>16}  ({part})")


@click.group()
def money() -> None:
    """Convert, split and format money amounts."""
    pass


@money.command("format")
@click.argument("amount", type=int)
@click.argument("currency")
@click.option("--locale", help="Locale tag such as en-US or de-DE (defaults to configured locale)")
@click.pass_context
def format_command(ctx: click.Context, amount: int, currency: str, locale: str | None) -> None:
    """
    Format AMOUNT (smallest unit) in CURRENCY.

    Examples:
      expenses money format 1999 USD
      expenses money format 123456 EUR --locale de-DE
    """
    click.echo(format_amount(amount, currency, locale or _config(ctx).money.locale))


@money.command("to-units")
@click.argument("display_amount")
@click.argument("currency")
def to_units(display_amount: str, currency: str) -> None:
    """
    Convert a display amount like 19.99 to smallest units.

    Examples:
      expenses money to-units 19.99 USD
      expenses money to-units 1.5 KWD
    """
    try:
        click.echo(str(to_smallest_unit(display_amount, currency)))
    except (InvalidCurrencyError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@money.command()
@click.argument("amount", type=int)
@click.argument("parts", type=int)
@click.option("--currency", help="Currency for display (defaults to configured currency)")
@click.pass_context
def split(ctx: click.Context, amount: int, parts: int, currency: str | None) -> None:
    """
    Split AMOUNT evenly into PARTS without losing a unit.

    Examples:
      expenses money split 1000 3
    """
    settings = _config(ctx)
    currency = currency or settings.money.default_currency

    try:
        shares = allocate_evenly(amount, parts)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="PARTS") from e

    click.echo(f"Split {format_amount(amount, currency, settings.money.locale)} into {parts} parts:")
    _echo_parts(shares, currency, settings.money.locale)


@money.command("allocate")
@click.argument("amount", type=int)
@click.argument("weights", nargs=-1, required=True)
@click.option("--currency", help="Currency for display (defaults to configured currency)")
@click.pass_context
def allocate_command(ctx: click.Context, amount: int, weights: tuple[str, ...], currency: str | None) -> None:
    """
    Split AMOUNT by relative WEIGHTS; the last share absorbs rounding.

    Examples:
      expenses money allocate 1000 1 1 2
      expenses money allocate 10000 0.6 0.4 --currency EUR
    """
    settings = _config(ctx)
    currency = currency or settings.money.default_currency

    try:
        shares = allocate(amount, list(weights))
    except (DivisionByZeroError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="WEIGHTS") from e

    click.echo(f"Allocate {format_amount(amount, currency, settings.money.locale)} by {' : '.join(weights)}:")
    _echo_parts(shares, currency, settings.money.locale)


@money.command("convert")
@click.argument("amount", type=int)
@click.argument("from_currency")
@click.argument("to_currency")
@click.option("--rate", help="Units of TO_CURRENCY per 1 FROM_CURRENCY")
@click.option(
    "--rates-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Exchange rate snapshot (defaults to configured rates file)",
)
@click.option("--fallback", is_flag=True, help="Use a 1:1 rate when no rate is available")
@click.pass_context
def convert_command(
    ctx: click.Context,
    amount: int,
    from_currency: str,
    to_currency: str,
    rate: str | None,
    rates_file: Path | None,
    fallback: bool,
) -> None:
    """
    Convert AMOUNT (smallest unit of FROM_CURRENCY) to TO_CURRENCY.

    Examples:
      expenses money convert 1000 JPY USD --rate 0.0067
      expenses money convert 4599 EUR USD --rates-file rates.json
    """
    settings = _config(ctx)

    try:
        if rate is not None:
            converted = convert(amount, from_currency, to_currency, rate)
        else:
            snapshot_path = rates_file or settings.exchange.rates_file
            if not snapshot_path.exists():
                raise click.UsageError("Provide --rate or an exchange rate snapshot (--rates-file)")

            snapshot = ExchangeRates.load(snapshot_path)
            if snapshot.is_stale(settings.exchange.max_age):
                click.echo(f"Warning: exchange rates in {snapshot_path} are stale", err=True)

            if fallback:
                converted = snapshot.convert_with_fallback(amount, from_currency, to_currency)
            else:
                converted = snapshot.convert(amount, from_currency, to_currency)
    except (InvalidCurrencyError, CurrencyConversionError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    locale = settings.money.locale
    click.echo(
        f"{format_amount(amount, from_currency, locale)} -> {format_amount(converted, to_currency, locale)} ({converted})"
    )


@money.command()
@click.option("--search", help="Filter by code or name (case-insensitive)")
def currencies(search: str | None) -> None:
    """
    List ISO 4217 currencies and their decimal places.

    Examples:
      expenses money currencies
      expenses money currencies --search dinar
    """
    options = get_currency_options()
    if search:
        needle = search.lower()
        options = [o for o in options if needle in o.label.lower()]

    for option in options:
        click.echo(f"{option.label:<50} {option.digits}")
