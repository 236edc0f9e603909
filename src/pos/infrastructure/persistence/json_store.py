"""Single JSON document holding every table.

Layout::

    {
      "version": 7,
      "products":   [...],
      "bills":      [...],
      "bill_items": [...],
      "drafts":     [...]
    }

Keeping all tables in one file means one ``os.replace`` publishes a
whole checkout at once.  ``version`` is bumped on every write; a writer
that read an older version is refused (optimistic concurrency).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pos.domain.exceptions import ConcurrentModificationError, PersistenceError

logger = logging.getLogger(__name__)

TABLES = ("products", "bills", "bill_items", "drafts")


def empty_document() -> dict:
    document: dict = {"version": 0}
    for table in TABLES:
        document[table] = []
    return document


class JsonStore:
    """File-backed document source; every ``write`` is durable at once."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> dict:
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read store {self._file_path}: {exc}") from exc
        document.setdefault("version", 0)
        for table in TABLES:
            document.setdefault(table, [])
        return document

    def write(self, document: dict) -> None:
        """Persist *document* if nobody else wrote since it was read."""
        expected = document.get("version", 0)
        current = self.read()["version"]
        if current != expected:
            raise ConcurrentModificationError(
                f"Store changed while this operation was in progress "
                f"(read version {expected}, now {current}); please retry"
            )

        payload = dict(document, version=expected + 1)
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            self._discard(tmp_path)
            raise PersistenceError(f"Cannot write store {self._file_path}: {exc}") from exc
        document["version"] = payload["version"]
        logger.debug("Store %s written at version %d", self._file_path, payload["version"])

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove temporary file %s", tmp_path, exc_info=True)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(empty_document(), indent=2) + "\n", encoding="utf-8"
            )


class StagedDocument:
    """In-memory document source used inside a unit of work."""

    def __init__(self, document: dict) -> None:
        self.document = document

    def read(self) -> dict:
        return self.document

    def write(self, document: dict) -> None:
        self.document = document
