"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):
    """Reads and writes the ``products`` table of a document source.

    The source is either a ``JsonStore`` (each save is written straight
    to disk) or a ``StagedDocument`` owned by a unit of work.
    """

    def __init__(self, source) -> None:
        self._source = source

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return str(uuid.uuid4())

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._source.read()["products"]:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_barcode(self, barcode: str) -> Product | None:
        for raw in self._source.read()["products"]:
            if raw["barcode"] == barcode:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._source.read()["products"]]
        products.sort(key=lambda p: p.created_at, reverse=True)
        return products

    def save(self, product: Product) -> None:
        document = self._source.read()
        records = document["products"]
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))
        self._source.write(document)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "barcode": product.barcode,
            "category": product.category,
            "price": str(product.price.amount),
            "quantity": product.quantity,
            "cost_price": (
                str(product.cost_price.amount) if product.cost_price is not None else None
            ),
            "sales_count": product.sales_count,
            "description": product.description,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        cost_price = raw.get("cost_price")
        return Product(
            id=raw["id"],
            name=raw["name"],
            barcode=raw["barcode"],
            category=raw["category"],
            price=Money(Decimal(raw["price"])),
            quantity=raw["quantity"],
            cost_price=Money(Decimal(cost_price)) if cost_price is not None else None,
            sales_count=raw.get("sales_count") or 0,
            description=raw.get("description"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
