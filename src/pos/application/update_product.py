"""Application service: Update Product use case."""

from __future__ import annotations

from pos.domain.exceptions import DuplicateBarcodeError, EntityNotFoundError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        *,
        name: str | None = None,
        barcode: str | None = None,
        category: str | None = None,
        price: str | None = None,
        cost_price: str | None = None,
        description: str | None = None,
    ) -> Product:
        """Change any subset of a product's descriptive fields.

        Stock and sales counters are not editable here; they move only
        through stock adjustments and checkout.  Existing bills keep
        their snapshot of the old values.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if barcode is not None and barcode.strip() != product.barcode:
            other = self._product_repo.get_by_barcode(barcode.strip())
            if other is not None and other.id != product.id:
                raise DuplicateBarcodeError(f"Barcode '{barcode.strip()}' is already in use")
            product.change_barcode(barcode)
        if name is not None:
            product.rename(name)
        if category is not None:
            product.recategorize(category)
        if price is not None:
            product.update_price(Money.of(price))
        if cost_price is not None:
            product.cost_price = Money.of(cost_price)
            product.touch()
        if description is not None:
            product.description = description or None
            product.touch()

        self._product_repo.save(product)
        return product
