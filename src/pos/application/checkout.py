"""Application service: Checkout use case.

Turns the in-progress bill into a persisted Bill and applies the sale to
the catalog.  Inserting the bill, its line items, every product update
and clearing the operator's stored draft happen inside one unit of
work, so either all of it is stored or none of it is.  A sale can
therefore never be committed while its draft survives to be sold again.

Validation (empty bill, missing user, unknown product) runs before any
write.  The builder is cleared only after a successful commit; after a
failure it is left exactly as it was so the operator can retry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from pos.domain.exceptions import EmptyBillError, EntityNotFoundError, PersistenceError
from pos.domain.model.bill import Bill
from pos.domain.model.bill_builder import BillBuilder
from pos.domain.model.product import Product
from pos.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

CommitListener = Callable[[Bill], None]


class CheckoutHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        on_commit: list[CommitListener] | None = None,
    ) -> None:
        self._uow = uow
        self._listeners: list[CommitListener] = list(on_commit or [])

    def subscribe(self, listener: CommitListener) -> None:
        """Call *listener* with each bill after it has been committed."""
        self._listeners.append(listener)

    def handle(
        self,
        builder: BillBuilder,
        user_id: str,
        payment_method: str | None = None,
        customer_name: str | None = None,
        customer_phone: str | None = None,
    ) -> Bill:
        if builder.is_empty:
            raise EmptyBillError("Cannot check out an empty bill")

        now = datetime.now(timezone.utc)
        bill = Bill.create(
            items=[item.snapshot() for item in builder.items],
            user_id=user_id,
            payment_method=payment_method,
            customer_name=customer_name,
            customer_phone=customer_phone,
            created_at=now,
        )

        sold: dict[str, int] = {}
        for item in builder.items:
            sold[item.product.id] = sold.get(item.product.id, 0) + item.quantity

        try:
            with self._uow:
                # Phase 1: load every product before writing anything
                products: list[tuple[Product, int]] = []
                for product_id, qty in sold.items():
                    product = self._uow.products.get_by_id(product_id)
                    if product is None:
                        raise EntityNotFoundError(
                            f"Product with ID '{product_id}' no longer exists"
                        )
                    products.append((product, qty))

                # Phase 2: stage the bill, the stock movements and the emptied
                # draft, then commit
                self._uow.bills.add(bill)
                for product, qty in products:
                    product.record_sale(qty, at=now)
                    self._uow.products.save(product)
                self._uow.drafts.save(bill.user_id, BillBuilder())
                self._uow.commit()
        except PersistenceError:
            logger.error("Checkout rolled back, nothing was recorded", exc_info=True)
            raise

        logger.info(
            "Bill %s committed: %d line(s), total %s",
            bill.id, len(bill.items), bill.total_amount,
        )
        builder.clear()
        for listener in self._listeners:
            listener(bill)
        return bill
