"""Bill aggregate: a finalized sales transaction.

A Bill owns snapshot copies of its line items, so later catalog changes
(price updates, renames, recategorization) never alter sales history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pos.domain.exceptions import EmptyBillError, ValidationError
from pos.domain.model.value_objects import Money, Quantity


class BillStatus(Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class BillLineItem:
    """What was sold, frozen at checkout time."""

    product_id: str
    product_name: str
    barcode: str
    category: str
    quantity: Quantity
    unit_price: Money  # price at time of sale

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Bill:
    """Aggregate root for completed sales.

    Use the ``Bill.create()`` factory for new bills; it enforces the
    non-empty rule.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted bills without re-validating.
    """

    id: str | None
    items: list[BillLineItem]
    user_id: str | None = None
    payment_method: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    status: BillStatus = BillStatus.COMPLETED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        items: list[BillLineItem],
        user_id: str,
        payment_method: str | None = None,
        customer_name: str | None = None,
        customer_phone: str | None = None,
        created_at: datetime | None = None,
    ) -> Bill:
        """Create a new completed bill, enforcing all invariants."""
        if not items:
            raise EmptyBillError("Cannot create an empty bill")
        if not user_id or not user_id.strip():
            raise ValidationError("A current user is required to record a bill")

        return Bill(
            id=None,
            items=list(items),
            user_id=user_id.strip(),
            payment_method=_blank_to_none(payment_method),
            customer_name=_blank_to_none(customer_name),
            customer_phone=_blank_to_none(customer_phone),
            status=BillStatus.COMPLETED,
            created_at=created_at or datetime.now(timezone.utc),
        )

    @property
    def total_amount(self) -> Money:
        return Money.sum(item.total_price for item in self.items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()
