"""Application service: Add Product use case."""

from __future__ import annotations

from pos.application.dto import ProductSpec
from pos.domain.exceptions import DuplicateBarcodeError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, spec: ProductSpec) -> Product:
        """Add a new product to the catalog.

        Barcodes are the scanner's lookup key, so a second product with
        the same barcode is rejected.
        """
        barcode = (spec.barcode or "").strip()
        if barcode and self._product_repo.get_by_barcode(barcode) is not None:
            raise DuplicateBarcodeError(f"Barcode '{barcode}' is already in use")

        product = Product.create(
            product_id=self._product_repo.next_id(),
            name=spec.name,
            barcode=barcode,
            category=spec.category,
            price=Money.of(spec.price),
            quantity=spec.quantity,
            cost_price=Money.of(spec.cost_price) if spec.cost_price else None,
            description=spec.description or None,
        )
        self._product_repo.save(product)
        return product
