"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSpec:
    """Input: the fields an operator supplies for a new product."""

    name: str
    barcode: str
    category: str
    price: str
    quantity: int = 0
    cost_price: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class BillLineDTO:
    """Output: a single bill line as displayed to the user."""

    position: int  # 1-based, as shown at the till
    product_name: str
    barcode: str
    quantity: int
    unit_price: str  # formatted, e.g. "$2.00"
    line_total: str


@dataclass(frozen=True)
class DraftBillDTO:
    """Output: the bill currently being rung up."""

    items: list[BillLineDTO]
    total: str


@dataclass(frozen=True)
class BillDTO:
    """Output: a completed bill as displayed to the user."""

    id: str
    status: str
    items: list[BillLineDTO]
    total: str
    item_count: int  # units, not lines
    created_at: str
    payment_method: str | None
    customer_name: str | None
    customer_phone: str | None
