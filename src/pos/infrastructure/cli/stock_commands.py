"""CLI commands for stock levels."""

from __future__ import annotations

import click

from pos.application.adjust_stock import AdjustStockHandler
from pos.domain.exceptions import DomainException
from pos.domain.service.analytics import low_stock_products
from pos.infrastructure.bootstrap import product_repository
from pos.infrastructure.config import Settings


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Counted quantity on hand.")
@click.pass_obj
def stock_set(settings: Settings, product_id: str, quantity: int) -> None:
    """Set the on-hand quantity for a product."""
    handler = AdjustStockHandler(product_repo=product_repository(settings))

    try:
        product = handler.set_quantity(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product.name}' set to {product.quantity}")


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Units received (+) or written off (-).")
@click.pass_obj
def stock_adjust(settings: Settings, product_id: str, delta: int) -> None:
    """Receive or write off stock (never goes below zero)."""
    handler = AdjustStockHandler(product_repo=product_repository(settings))

    try:
        product = handler.adjust_quantity(product_id, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product.name}' is now {product.quantity}")


@click.command("low")
@click.option("--threshold", type=int, default=None, help="Override the low-stock threshold.")
@click.pass_obj
def stock_low(settings: Settings, threshold: int | None) -> None:
    """List products at or below the low-stock threshold."""
    limit = settings.low_stock_threshold if threshold is None else threshold
    try:
        products = low_stock_products(product_repository(settings).list_all(), limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo(f"No products at or below {limit} units.")
        return

    click.echo(f"{'Product':<20} {'Barcode':<14} {'Qty':>5}")
    click.echo("-" * 41)
    for p in products:
        click.echo(f"{p.name:<20} {p.barcode:<14} {p.quantity:>5}")
