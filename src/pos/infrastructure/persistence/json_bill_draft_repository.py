"""JSON-document-backed storage for the in-progress bills.

Drafts live in the ``drafts`` table of the same document as the catalog
and the bills, one record per user.  Only product IDs and quantities
are stored; products are re-read from the catalog on load so prices and
stock levels are always current.
"""

from __future__ import annotations

import logging

from pos.domain.model.bill_builder import BillBuilder, BillItem
from pos.domain.repository.bill_draft_repository import BillDraftRepository
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonBillDraftRepository(BillDraftRepository):
    """Reads and writes the ``drafts`` table of a document source.

    Like the other JSON repositories the source is either a ``JsonStore``
    or the ``StagedDocument`` of a unit of work, which lets checkout
    clear the draft in the same commit as the sale.
    """

    def __init__(self, source, product_repo: ProductRepository) -> None:
        self._source = source
        self._product_repo = product_repo

    def load(self, user_id: str) -> BillBuilder:
        record = self._find(self._source.read(), user_id)
        items: list[BillItem] = []
        for raw in record["items"] if record else []:
            product = self._product_repo.get_by_id(raw["product_id"])
            if product is None:
                logger.warning("Dropping draft line for unknown product %s", raw["product_id"])
                continue
            items.append(BillItem(product=product, quantity=raw["quantity"]))
        return BillBuilder(items)

    def save(self, user_id: str, builder: BillBuilder) -> None:
        document = self._source.read()
        document["drafts"] = [d for d in document["drafts"] if d["user_id"] != user_id]
        if not builder.is_empty:
            document["drafts"].append(
                {
                    "user_id": user_id,
                    "items": [
                        {"product_id": item.product.id, "quantity": item.quantity}
                        for item in builder.items
                    ],
                }
            )
        self._source.write(document)

    @staticmethod
    def _find(document: dict, user_id: str) -> dict | None:
        for record in document["drafts"]:
            if record["user_id"] == user_id:
                return record
        return None
