"""Application service: bill history (query)."""

from __future__ import annotations

from pos.application.dto import BillDTO
from pos.application.mapping import bill_to_dto
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.repository.bill_repository import BillRepository


class ShowBillsHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def history(self, user_id: str) -> list[BillDTO]:
        if not user_id:
            raise ValidationError("A current user is required to list bills")
        return [bill_to_dto(bill) for bill in self._bill_repo.list_for_user(user_id)]

    def show(self, bill_id: str) -> BillDTO:
        bill = self._bill_repo.get_by_id(bill_id)
        if bill is None:
            raise EntityNotFoundError(f"Bill '{bill_id}' not found")
        return bill_to_dto(bill)
