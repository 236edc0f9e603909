"""Application service: product lookup (query).

The barcode scanner hands us nothing but the decoded text; this is the
only thing the core needs from it.
"""

from __future__ import annotations

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class FindProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_barcode(self, barcode: str) -> Product:
        product = self._product_repo.get_by_barcode(barcode)
        if product is None:
            raise EntityNotFoundError(f"No product with barcode '{barcode}'")
        return product

    def search(self, query: str) -> list[Product]:
        """Name/category contain the query (any case), or barcode contains it."""
        needle = query.strip().lower()
        return [
            p
            for p in self._product_repo.list_all()
            if needle in p.name.lower()
            or needle in p.category.lower()
            or query.strip() in p.barcode
        ]
