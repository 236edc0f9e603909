"""JSON-document-backed implementation of BillRepository.

Bill headers live in ``bills`` and their lines in ``bill_items``, each
line pointing back at its header through ``bill_id``.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from pos.domain.model.bill import Bill, BillLineItem, BillStatus
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.bill_repository import BillRepository


class JsonBillRepository(BillRepository):

    def __init__(self, source) -> None:
        self._source = source

    # --- BillRepository interface ---------------------------------------------

    def next_id(self) -> str:
        return str(uuid.uuid4())

    def get_by_id(self, bill_id: str) -> Bill | None:
        document = self._source.read()
        for raw in document["bills"]:
            if raw["id"] == bill_id:
                return self._to_domain(raw, self._items_of(document, bill_id))
        return None

    def list_for_user(self, user_id: str) -> list[Bill]:
        document = self._source.read()
        items_by_bill: dict[str, list[dict]] = {}
        for raw_item in document["bill_items"]:
            items_by_bill.setdefault(raw_item["bill_id"], []).append(raw_item)

        bills = [
            self._to_domain(raw, items_by_bill.get(raw["id"], []))
            for raw in document["bills"]
            if raw.get("user_id") == user_id
        ]
        bills.sort(key=lambda b: b.created_at, reverse=True)
        return bills

    def add(self, bill: Bill) -> None:
        if bill.id is None:
            bill.id = self.next_id()

        document = self._source.read()
        document["bills"].append(self._header_to_raw(bill))
        document["bill_items"].extend(
            self._item_to_raw(bill, item) for item in bill.items
        )
        self._source.write(document)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _header_to_raw(bill: Bill) -> dict:
        return {
            "id": bill.id,
            "user_id": bill.user_id,
            "total_amount": str(bill.total_amount.amount),
            "payment_method": bill.payment_method,
            "customer_name": bill.customer_name,
            "customer_phone": bill.customer_phone,
            "status": bill.status.value,
            "created_at": bill.created_at.isoformat(),
        }

    @staticmethod
    def _item_to_raw(bill: Bill, item: BillLineItem) -> dict:
        return {
            "id": str(uuid.uuid4()),
            "bill_id": bill.id,
            "product_id": item.product_id,
            "product_name": item.product_name,
            "barcode": item.barcode,
            "category": item.category,
            "quantity": item.quantity.value,
            "price_at_time": str(item.unit_price.amount),
            "total_price": str(item.total_price.amount),
            "created_at": bill.created_at.isoformat(),
        }

    @staticmethod
    def _items_of(document: dict, bill_id: str) -> list[dict]:
        return [i for i in document["bill_items"] if i["bill_id"] == bill_id]

    @staticmethod
    def _to_domain(raw: dict, raw_items: list[dict]) -> Bill:
        items = [
            BillLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                barcode=i.get("barcode", ""),
                category=i.get("category", ""),
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["price_at_time"])),
            )
            for i in raw_items
        ]
        return Bill(
            id=raw["id"],
            items=items,
            user_id=raw.get("user_id"),
            payment_method=raw.get("payment_method"),
            customer_name=raw.get("customer_name"),
            customer_phone=raw.get("customer_phone"),
            status=BillStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
