"""Abstract repository for Bill aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.bill import Bill


class BillRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh opaque bill ID."""

    @abstractmethod
    def get_by_id(self, bill_id: str) -> Bill | None:
        """Return a bill with its line items, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Bill]:
        """Return the user's bills with line items, newest first."""

    @abstractmethod
    def add(self, bill: Bill) -> None:
        """Insert the bill header and its line items.

        Assigns ``bill.id`` when it is None.  Bills are immutable once
        stored, so there is no update path.
        """
