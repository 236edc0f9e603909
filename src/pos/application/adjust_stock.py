"""Application service: manual stock adjustments."""

from __future__ import annotations

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def set_quantity(self, product_id: str, new_quantity: int) -> Product:
        """Set the on-hand quantity after a stock count."""
        product = self._load(product_id)
        product.set_quantity(new_quantity)
        self._product_repo.save(product)
        return product

    def adjust_quantity(self, product_id: str, delta: int) -> Product:
        """Receive (positive delta) or write off (negative delta) stock."""
        product = self._load(product_id)
        product.adjust_quantity(delta)
        self._product_repo.save(product)
        return product

    def _load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product
