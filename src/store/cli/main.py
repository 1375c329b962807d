"""
CLI for trying the pricing engine: checkout a list of items under one scheme.
Items: NAME=CENTS, NAME=CENTS@WEIGHT (priced by weight); suffix +tax makes an item taxable.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog
import typer

import store
from store.catalog import Item, Priceable, Taxable, WeightedItem, taxable
from store.checkout import Register, format_cents
from store.core import ConfigurationError, StoreError, load_settings
from store.pricing import scheme_from_config

app = typer.Typer(help="Store CLI: scan items into a register and print the receipt.")

_TAX_SUFFIX = "+tax"


def configure_logging(verbose: bool) -> None:
    """JSON log lines on stderr; debug events only with --verbose."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def parse_item(arg: str, tax_rate: float) -> Priceable:
    """Beans=499 -> Item, Beef=500@1.5 -> WeightedItem, Soap=100+tax -> taxable Item."""
    is_taxable = arg.endswith(_TAX_SUFFIX)
    if is_taxable:
        arg = arg[: -len(_TAX_SUFFIX)]
    name, sep, price = arg.rpartition("=")
    if not sep:
        raise ConfigurationError(f"Item {arg!r} must look like NAME=CENTS or NAME=CENTS@WEIGHT")
    try:
        if "@" in price:
            cents, weight = price.split("@", 1)
            item: Priceable = WeightedItem(name, int(cents), float(weight))
        else:
            item = Item(name, int(price))
    except ValueError as e:
        raise ConfigurationError(f"Item {arg!r}: {e}") from e
    return taxable(item, tax_rate) if is_taxable else item


def _scheme_params(
    kind: str,
    item_name: Optional[str],
    price: Optional[int],
    discount: Optional[float],
    required: List[str],
) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if kind == "grouped":
        params["items_required"] = required
        if discount is not None:
            params["discount_percent"] = discount
        return params
    if kind == "none":
        return params
    if item_name is not None:
        params["item_name"] = item_name
    if kind == "two_for_one" and price is not None:
        params["single_price"] = price
    if kind == "rain_check" and price is not None:
        params["discounted_price"] = price
    if kind == "coupon" and discount is not None:
        params["discount"] = discount
    return params


@app.command()
def checkout(
    items: List[str] = typer.Argument(..., help="Items: NAME=CENTS or NAME=CENTS@WEIGHT, optional +tax"),
    scheme: str = typer.Option("none", "--scheme", "-s", help="none, two_for_one, grouped, coupon, rain_check"),
    item_name: Optional[str] = typer.Option(None, "--item-name", help="Item the scheme targets"),
    price: Optional[int] = typer.Option(None, "--price", help="single_price / discounted_price in cents"),
    discount: Optional[float] = typer.Option(None, "--discount", help="Fraction off, e.g. 0.15"),
    required: List[str] = typer.Option([], "--required", "-r", help="Grouped pricing: required item name (repeat)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Scan ITEMS into a register, print the receipt, the discounted subtotal and tax."""
    configure_logging(verbose)
    try:
        settings = load_settings()
        pricing = scheme_from_config(scheme, **_scheme_params(scheme, item_name, price, discount, required))
        register = Register(pricing)
        for arg in items:
            register.scan(parse_item(arg, settings.tax_rate))
    except StoreError as e:
        typer.secho(e.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    subtotal = register.subtotal()
    receipt = register.total()
    typer.echo(receipt.output(settings.currency_symbol))
    typer.echo(f"SUBTOTAL: {format_cents(subtotal, settings.currency_symbol)}")
    taxed = [item for item in receipt.items() if isinstance(item, Taxable)]
    if taxed:
        tax = sum(item.tax() for item in taxed)
        typer.echo(f"TAX: {format_cents(tax, settings.currency_symbol)}")


@app.command()
def version() -> None:
    """Print the package version."""
    typer.echo(store.__version__)


def main() -> None:
    """Entry point for the store console command."""
    app()


if __name__ == "__main__":
    main()
