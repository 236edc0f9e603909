"""Transaction boundary spanning the product, bill and draft repositories.

Checkout writes a bill header, its line items, one update per sold
product and the cleared draft of the operator who rang it up.  Those
writes must land together or not at all, so they go through a unit of
work:

    with uow:
        uow.bills.add(bill)
        uow.products.save(product)
        uow.drafts.save(user_id, BillBuilder())
        uow.commit()

Leaving the ``with`` block without ``commit()`` (including via an
exception) rolls every staged write back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.repository.bill_draft_repository import BillDraftRepository
from pos.domain.repository.bill_repository import BillRepository
from pos.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    bills: BillRepository
    drafts: BillDraftRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # No-op after a successful commit; discards staged writes otherwise
        self.rollback()

    @abstractmethod
    def _begin(self) -> None:
        """Open the transaction and bind ``products``, ``bills`` and ``drafts``."""

    @abstractmethod
    def commit(self) -> None:
        """Apply every staged write atomically."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged writes that have not been committed."""
