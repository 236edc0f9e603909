"""Product aggregate.

Products live independently of bills. They have their own lifecycle:
prices change, stock is counted in and sold out, but products are never
removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root; it is the entry point for any operation
    involving a product's stock or sales counters.

    Invariants:
    - ``quantity`` is never negative
    - ``price`` is always greater than zero
    """

    id: str
    name: str
    barcode: str
    category: str
    price: Money
    quantity: int = 0
    cost_price: Money | None = None
    sales_count: int = 0
    description: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: str,
        name: str,
        barcode: str,
        category: str,
        price: Money,
        quantity: int = 0,
        cost_price: Money | None = None,
        description: str | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        name = _required(name, "Product name")
        barcode = _required(barcode, "Barcode")
        category = _required(category, "Category")
        _check_price(price)
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        now = _utcnow()
        return Product(
            id=product_id,
            name=name,
            barcode=barcode,
            category=category,
            price=price,
            quantity=quantity,
            cost_price=cost_price,
            description=description,
            created_at=now,
            updated_at=now,
        )

    # --- Stock ----------------------------------------------------------------

    def set_quantity(self, new_quantity: int) -> None:
        """Replace the on-hand count after a manual stock take."""
        if new_quantity < 0:
            raise ValidationError(
                f"Quantity cannot be negative, got {new_quantity}"
            )
        self.quantity = new_quantity
        self.touch()

    def adjust_quantity(self, delta: int) -> None:
        """Add (or with a negative delta, remove) stock; never below zero."""
        self.quantity = max(0, self.quantity + delta)
        self.touch()

    def record_sale(self, quantity: int, at: datetime | None = None) -> None:
        """Apply a completed sale: stock goes down, sales counter goes up."""
        if quantity <= 0:
            raise ValidationError("Sold quantity must be positive")
        self.quantity = max(0, self.quantity - quantity)
        self.sales_count += quantity
        self.touch(at)

    # --- Descriptive fields ---------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing bills because bills capture a
        price snapshot at checkout.
        """
        _check_price(new_price)
        self.price = new_price
        self.touch()

    def rename(self, name: str) -> None:
        self.name = _required(name, "Product name")
        self.touch()

    def recategorize(self, category: str) -> None:
        self.category = _required(category, "Category")
        self.touch()

    def change_barcode(self, barcode: str) -> None:
        self.barcode = _required(barcode, "Barcode")
        self.touch()

    def touch(self, at: datetime | None = None) -> None:
        self.updated_at = at or _utcnow()

    # --- Computed properties --------------------------------------------------

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity

    def is_low_stock(self, threshold: int) -> bool:
        return self.quantity <= threshold


def _required(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _check_price(price: Money) -> None:
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
