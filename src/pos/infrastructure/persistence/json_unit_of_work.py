"""Unit of work over a ``JsonStore``.

``__enter__`` reads the document once; the repositories then work on
that in-memory copy.  ``commit`` writes it back in a single replace,
refusing if the store's version moved on in the meantime.  Anything
not committed is simply dropped.
"""

from __future__ import annotations

import logging

from pos.domain.exceptions import PersistenceError
from pos.domain.repository.unit_of_work import UnitOfWork
from pos.infrastructure.persistence.json_bill_draft_repository import (
    JsonBillDraftRepository,
)
from pos.infrastructure.persistence.json_bill_repository import JsonBillRepository
from pos.infrastructure.persistence.json_product_repository import JsonProductRepository
from pos.infrastructure.persistence.json_store import JsonStore, StagedDocument

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonStore) -> None:
        self._store = store
        self._staged: StagedDocument | None = None

    def _begin(self) -> None:
        self._staged = StagedDocument(self._store.read())
        self.products = JsonProductRepository(self._staged)
        self.bills = JsonBillRepository(self._staged)
        self.drafts = JsonBillDraftRepository(self._staged, self.products)

    def commit(self) -> None:
        if self._staged is None:
            raise PersistenceError("No open unit of work to commit")
        self._store.write(self._staged.document)
        self._staged = None

    def rollback(self) -> None:
        if self._staged is not None:
            logger.warning("Discarding uncommitted changes to %s", self._store.file_path)
            self._staged = None
