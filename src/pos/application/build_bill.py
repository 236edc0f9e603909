"""Application service: ring up items on the in-progress bill.

The draft lives in a ``BillDraftRepository`` between calls so a
stateless presentation layer (the CLI) can build a bill one scan at a
time.  Each operator has a draft of their own, keyed by user id.  Each
operation is load → mutate the BillBuilder → save; a rejected mutation
raises before the save, so the stored draft is left as it was.
"""

from __future__ import annotations

from pos.application.dto import DraftBillDTO
from pos.application.mapping import draft_to_dto
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.repository.bill_draft_repository import BillDraftRepository
from pos.domain.repository.product_repository import ProductRepository


class BillDraftHandler:

    def __init__(
        self,
        draft_repo: BillDraftRepository,
        product_repo: ProductRepository,
        user_id: str,
    ) -> None:
        if not user_id or not user_id.strip():
            raise ValidationError("A current user is required to ring up a bill")
        self._draft_repo = draft_repo
        self._product_repo = product_repo
        self._user_id = user_id.strip()

    def add_by_barcode(self, barcode: str, quantity: int = 1) -> DraftBillDTO:
        product = self._product_repo.get_by_barcode(barcode)
        if product is None:
            raise EntityNotFoundError(f"No product with barcode '{barcode}'")
        builder = self._draft_repo.load(self._user_id)
        builder.add_item(product, quantity)
        self._draft_repo.save(self._user_id, builder)
        return draft_to_dto(builder)

    def add_by_id(self, product_id: str, quantity: int = 1) -> DraftBillDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        builder = self._draft_repo.load(self._user_id)
        builder.add_item(product, quantity)
        self._draft_repo.save(self._user_id, builder)
        return draft_to_dto(builder)

    def remove(self, index: int) -> DraftBillDTO:
        builder = self._draft_repo.load(self._user_id)
        builder.remove_item(index)
        self._draft_repo.save(self._user_id, builder)
        return draft_to_dto(builder)

    def set_quantity(self, index: int, quantity: int) -> DraftBillDTO:
        builder = self._draft_repo.load(self._user_id)
        builder.set_item_quantity(index, quantity)
        self._draft_repo.save(self._user_id, builder)
        return draft_to_dto(builder)

    def clear(self) -> None:
        builder = self._draft_repo.load(self._user_id)
        builder.clear()
        self._draft_repo.save(self._user_id, builder)

    def show(self) -> DraftBillDTO:
        return draft_to_dto(self._draft_repo.load(self._user_id))
