import logging
from pathlib import Path

import click

from pos.domain.exceptions import DomainException
from pos.infrastructure.cli.bill_commands import (
    bill_add,
    bill_checkout,
    bill_clear,
    bill_history,
    bill_remove,
    bill_set_quantity,
    bill_show,
)
from pos.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_scan,
    product_search,
    product_update,
)
from pos.infrastructure.cli.report_commands import (
    report_categories,
    report_forecast,
    report_sales,
    report_summary,
    report_top,
)
from pos.infrastructure.cli.stock_commands import stock_adjust, stock_low, stock_set
from pos.infrastructure.config import load_settings


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding store.json (default: $POS_DATA_DIR or ./data).",
)
@click.option("--user", "user_id", default=None, help="Current operator (default: $POS_USER).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, user_id: str | None, verbose: bool) -> None:
    """POS: point of sale and inventory"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    ctx.obj = settings.override(data_dir=data_dir, user_id=user_id)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Count, receive and write off stock."""


@cli.group()
def bill() -> None:
    """Ring up and settle bills."""


@cli.group()
def report() -> None:
    """Sales analytics."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_scan)
product.add_command(product_search)
product.add_command(product_update)
stock.add_command(stock_adjust)
stock.add_command(stock_low)
stock.add_command(stock_set)
bill.add_command(bill_add)
bill.add_command(bill_checkout)
bill.add_command(bill_clear)
bill.add_command(bill_history)
bill.add_command(bill_remove)
bill.add_command(bill_set_quantity)
bill.add_command(bill_show)
report.add_command(report_categories)
report.add_command(report_forecast)
report.add_command(report_sales)
report.add_command(report_summary)
report.add_command(report_top)
