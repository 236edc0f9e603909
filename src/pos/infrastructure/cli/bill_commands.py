"""CLI commands for ringing up and settling bills."""

from __future__ import annotations

import click

from pos.application.build_bill import BillDraftHandler
from pos.application.mapping import bill_to_dto
from pos.application.show_bills import ShowBillsHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import (
    analytics_view,
    bill_draft_repository,
    bill_repository,
    checkout_handler,
    product_repository,
)
from pos.infrastructure.config import Settings


def _require_user(settings: Settings) -> str:
    user_id = (settings.user_id or "").strip()
    if not user_id:
        raise click.UsageError("No current user; pass --user or set POS_USER.")
    return user_id


def _draft_handler(settings: Settings) -> BillDraftHandler:
    return BillDraftHandler(
        draft_repo=bill_draft_repository(settings),
        product_repo=product_repository(settings),
        user_id=_require_user(settings),
    )


def _display_lines(dto) -> None:
    """Shared formatting for draft and completed bills."""
    click.echo(f"  {'#':>3} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.position:>3} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Bill Total':<31} {dto.total:>20}")


def _display_bill(dto) -> None:
    click.echo(f"Bill {dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    if dto.payment_method:
        click.echo(f"Payment:  {dto.payment_method}")
    if dto.customer_name:
        click.echo(f"Customer: {dto.customer_name} {dto.customer_phone or ''}".rstrip())
    click.echo()
    _display_lines(dto)


@click.command("add")
@click.option("--barcode", default=None, help="Scanned barcode.")
@click.option("--id", "product_id", default=None, help="Product ID (when picked from search).")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_obj
def bill_add(
    settings: Settings, barcode: str | None, product_id: str | None, quantity: int
) -> None:
    """Add a product to the current bill."""
    if bool(barcode) == bool(product_id):
        raise click.UsageError("Give exactly one of --barcode or --id.")

    handler = _draft_handler(settings)
    try:
        if barcode:
            dto = handler.add_by_barcode(barcode, quantity)
        else:
            dto = handler.add_by_id(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_lines(dto)


@click.command("remove")
@click.option("--line", required=True, type=int, help="Line number shown by `bill show`.")
@click.pass_obj
def bill_remove(settings: Settings, line: int) -> None:
    """Remove a line from the current bill."""
    try:
        dto = _draft_handler(settings).remove(line - 1)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_lines(dto)


@click.command("set-qty")
@click.option("--line", required=True, type=int, help="Line number shown by `bill show`.")
@click.option("--quantity", required=True, type=int, help="New quantity (at least 1).")
@click.pass_obj
def bill_set_quantity(settings: Settings, line: int, quantity: int) -> None:
    """Change the quantity of a line on the current bill."""
    try:
        dto = _draft_handler(settings).set_quantity(line - 1, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_lines(dto)


@click.command("show")
@click.pass_obj
def bill_show(settings: Settings) -> None:
    """Show the current bill."""
    try:
        dto = _draft_handler(settings).show()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.items:
        click.echo("The current bill is empty.")
        return
    _display_lines(dto)


@click.command("clear")
@click.pass_obj
def bill_clear(settings: Settings) -> None:
    """Discard every line on the current bill."""
    try:
        _draft_handler(settings).clear()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Current bill cleared.")


@click.command("checkout")
@click.option("--payment-method", default="Cash", show_default=True, help="How the customer paid.")
@click.option("--customer-name", default=None, help="Customer name (optional).")
@click.option("--customer-phone", default=None, help="Customer phone (optional).")
@click.pass_obj
def bill_checkout(
    settings: Settings,
    payment_method: str,
    customer_name: str | None,
    customer_phone: str | None,
) -> None:
    """Settle the current bill and update stock."""
    user_id = _require_user(settings)
    draft_repo = bill_draft_repository(settings)
    handler = checkout_handler(settings, analytics_view(settings))

    try:
        builder = draft_repo.load(user_id)
        bill = handler.handle(
            builder,
            user_id=user_id,
            payment_method=payment_method,
            customer_name=customer_name,
            customer_phone=customer_phone,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_bill(bill_to_dto(bill))


@click.command("history")
@click.option("--id", "bill_id", default=None, help="Show a single bill in full.")
@click.pass_obj
def bill_history(settings: Settings, bill_id: str | None) -> None:
    """List the current user's bills, newest first."""
    handler = ShowBillsHandler(bill_repo=bill_repository(settings))

    try:
        if bill_id:
            _display_bill(handler.show(bill_id))
            return
        dtos = handler.history(_require_user(settings))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No bills yet.")
        return

    click.echo(f"{'Bill':<36}  {'Created':<20} {'Items':>5} {'Total':>10}")
    click.echo("-" * 74)
    for dto in dtos:
        click.echo(
            f"{dto.id:<36}  {dto.created_at:<20} "
            f"{dto.item_count:>5} {dto.total:>10}"
        )
