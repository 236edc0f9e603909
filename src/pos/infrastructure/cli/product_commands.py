"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pos.application.add_product import AddProductHandler
from pos.application.dto import ProductSpec
from pos.application.find_product import FindProductHandler
from pos.application.update_product import UpdateProductHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.product import Product
from pos.infrastructure.bootstrap import product_repository
from pos.infrastructure.config import Settings


def _display_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<36}  {'Name':<20} {'Barcode':<14} {'Category':<12} "
        f"{'Price':>9} {'Qty':>5} {'Sold':>5}"
    )
    click.echo("-" * 109)
    for p in products:
        click.echo(
            f"{p.id:<36}  {p.name:<20} {p.barcode:<14} {p.category:<12} "
            f"{str(p.price):>9} {p.quantity:>5} {p.sales_count:>5}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--barcode", required=True, help="Barcode printed on the product.")
@click.option("--category", required=True, help="Category label.")
@click.option("--price", required=True, help="Selling price (e.g. 3.99).")
@click.option("--quantity", default=0, show_default=True, type=int, help="Opening stock.")
@click.option("--cost-price", default=None, help="Purchase price (optional).")
@click.option("--description", default=None, help="Free-text description.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    barcode: str,
    category: str,
    price: str,
    quantity: int,
    cost_price: str | None,
    description: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))
    spec = ProductSpec(
        name=name,
        barcode=barcode,
        category=category,
        price=price,
        quantity=quantity,
        cost_price=cost_price,
        description=description,
    )

    try:
        product = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products, newest first."""
    try:
        products = product_repository(settings).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_products(products)


@click.command("scan")
@click.option("--barcode", required=True, help="Decoded barcode text.")
@click.pass_obj
def product_scan(settings: Settings, barcode: str) -> None:
    """Look up a product by its barcode."""
    handler = FindProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.by_barcode(barcode)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products([product])


@click.command("search")
@click.argument("query")
@click.pass_obj
def product_search(settings: Settings, query: str) -> None:
    """Find products by name, category or barcode."""
    handler = FindProductHandler(product_repo=product_repository(settings))

    try:
        products = handler.search(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--barcode", default=None, help="New barcode.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, help="New selling price.")
@click.option("--cost-price", default=None, help="New purchase price.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(settings: Settings, product_id: str, **changes: str | None) -> None:
    """Update a product's details (stock is changed with `stock`)."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(product_id, **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' updated")
