"""Abstract storage for each operator's in-progress bill between calls."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.bill_builder import BillBuilder


class BillDraftRepository(ABC):
    """One draft per user; operators never see each other's lines."""

    @abstractmethod
    def load(self, user_id: str) -> BillBuilder:
        """Return the user's stored draft, or an empty builder."""

    @abstractmethod
    def save(self, user_id: str, builder: BillBuilder) -> None:
        """Replace the user's stored draft with the builder's current lines."""
