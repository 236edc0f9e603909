"""Runtime settings, read from the environment.

``POS_DATA_DIR``             where ``store.json`` lives
``POS_LOW_STOCK_THRESHOLD``  quantity at or below which stock is "low"
``POS_USER``                 the signed-in operator; scopes drafts and bill history
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from pos.domain.exceptions import ValidationError
from pos.domain.service.analytics import DEFAULT_LOW_STOCK_THRESHOLD

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    user_id: str | None = None

    @property
    def store_path(self) -> Path:
        return self.data_dir / "store.json"

    def override(self, **changes) -> Settings:
        """Return a copy with every non-None value in *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    raw_threshold = env.get("POS_LOW_STOCK_THRESHOLD", "").strip()
    threshold = DEFAULT_LOW_STOCK_THRESHOLD
    if raw_threshold:
        try:
            threshold = int(raw_threshold)
        except ValueError as exc:
            raise ValidationError(
                f"POS_LOW_STOCK_THRESHOLD must be an integer, got {raw_threshold!r}"
            ) from exc
        if threshold < 0:
            raise ValidationError("POS_LOW_STOCK_THRESHOLD cannot be negative")

    data_dir = env.get("POS_DATA_DIR", "").strip()
    return Settings(
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        low_stock_threshold=threshold,
        user_id=env.get("POS_USER", "").strip() or None,
    )
