"""CLI commands for sales analytics."""

from __future__ import annotations

import click

from pos.application.show_analytics import AnalyticsReport
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import analytics_view
from pos.infrastructure.config import Settings


def _report(settings: Settings) -> AnalyticsReport:
    if not settings.user_id:
        raise click.UsageError("No current user; pass --user or set POS_USER.")
    try:
        return analytics_view(settings).report(settings.user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("sales")
@click.pass_obj
def report_sales(settings: Settings) -> None:
    """Revenue per month (all years combined)."""
    for month in _report(settings).monthly_sales:
        click.echo(f"{month.name:<4} {str(month.sales):>12}")


@click.command("categories")
@click.pass_obj
def report_categories(settings: Settings) -> None:
    """Share of revenue per category."""
    shares = _report(settings).category_sales
    if not shares:
        click.echo("No sales yet.")
        return
    for category, percent in shares.items():
        click.echo(f"{category:<20} {percent:>4}%")


@click.command("forecast")
@click.pass_obj
def report_forecast(settings: Settings) -> None:
    """Weekly demand estimate for the newest products."""
    forecasts = _report(settings).forecasts
    if not forecasts:
        click.echo("No products found.")
        return

    click.echo(f"{'Product':<20} {'Stock':>6} {'Demand':>7} {'Recommend':>10} {'Trend':>11}")
    click.echo("-" * 58)
    for f in forecasts:
        click.echo(
            f"{f.name:<20} {f.current_stock:>6} {f.predicted_demand:>7} "
            f"{f.recommended_stock:>10} {f.trend:>11}"
        )


@click.command("top")
@click.pass_obj
def report_top(settings: Settings) -> None:
    """Best-selling products."""
    for p in _report(settings).top_sellers:
        click.echo(f"{p.name:<20} {p.sales_count:>6}")


@click.command("summary")
@click.pass_obj
def report_summary(settings: Settings) -> None:
    """Headline figures for the dashboard."""
    report = _report(settings)
    click.echo(f"Total revenue:    {report.total_revenue}")
    click.echo(f"Bills:            {report.bill_count}")
    click.echo(f"Inventory value:  {report.inventory_value}")
    click.echo(f"Low-stock items:  {len(report.low_stock)}")
