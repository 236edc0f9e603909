"""The in-progress bill at the till.

Holds working line items that reference catalog products.  Every
mutation is validated against the product's available stock *before*
anything changes, so a rejected scan never disturbs the bill.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import IndexOutOfRangeError, InsufficientStockError
from pos.domain.model.bill import BillLineItem
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass
class BillItem:
    product: Product
    quantity: int

    @property
    def total_price(self) -> Money:
        return self.product.price * self.quantity

    def snapshot(self) -> BillLineItem:
        """Copy the product details as they are right now."""
        return BillLineItem(
            product_id=self.product.id,
            product_name=self.product.name,
            barcode=self.product.barcode,
            category=self.product.category,
            quantity=Quantity(self.quantity),
            unit_price=self.product.price,
        )


class BillBuilder:
    """Ordered, editable list of BillItems.

    The constructor accepts pre-existing items without validation so a
    stored draft can be reconstituted as-is.
    """

    def __init__(self, items: list[BillItem] | None = None) -> None:
        self._items: list[BillItem] = list(items or [])

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> list[BillItem]:
        return list(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def total(self) -> Money:
        return Money.sum(item.total_price for item in self._items)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> BillItem:
        """Add *quantity* units of *product*, merging with an existing line."""
        qty = Quantity(quantity).value

        index = self._index_of(product.id)
        existing_qty = self._items[index].quantity if index is not None else 0
        new_qty = existing_qty + qty
        if new_qty > product.quantity:
            raise InsufficientStockError(product.name, new_qty, product.quantity)

        if index is None:
            item = BillItem(product=product, quantity=qty)
            self._items.append(item)
        else:
            # Keep the freshest view of the product for later stock checks
            item = BillItem(product=product, quantity=new_qty)
            self._items[index] = item
        return item

    def remove_item(self, index: int) -> BillItem:
        self._check_index(index)
        return self._items.pop(index)

    def set_item_quantity(self, index: int, quantity: int) -> BillItem:
        """Replace the quantity of one line; use ``remove_item`` to drop it."""
        self._check_index(index)
        qty = Quantity(quantity).value
        product = self._items[index].product
        if qty > product.quantity:
            raise InsufficientStockError(product.name, qty, product.quantity)

        item = BillItem(product=product, quantity=qty)
        self._items[index] = item
        return item

    def clear(self) -> None:
        self._items = []

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: str) -> int | None:
        for i, item in enumerate(self._items):
            if item.product.id == product_id:
                return i
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(
                f"No bill line at position {index} "
                f"(bill has {len(self._items)} lines)"
            )
