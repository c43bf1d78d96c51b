"""Storage for record collections.

Each collection is stored as a whole (one JSON document per collection),
encoded with Pydantic so every record round-trips exactly.

Persistence is best-effort: a collection that cannot be read loads as
empty, and a failed write leaves the in-memory state authoritative. Both
cases are logged and never raised.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from finhealth.core.models import BillReminder, Budget, Expense, Investment, SavingsGoal

logger = logging.getLogger(__name__)

EXPENSES = "expenses"
INVESTMENTS = "investments"
BUDGETS = "budgets"
SAVINGS_GOALS = "savings_goals"
BILL_REMINDERS = "bill_reminders"

COLLECTIONS = (EXPENSES, INVESTMENTS, BUDGETS, SAVINGS_GOALS, BILL_REMINDERS)

_ADAPTERS: dict[str, TypeAdapter] = {
    EXPENSES: TypeAdapter(list[Expense]),
    INVESTMENTS: TypeAdapter(list[Investment]),
    BUDGETS: TypeAdapter(list[Budget]),
    SAVINGS_GOALS: TypeAdapter(list[SavingsGoal]),
    BILL_REMINDERS: TypeAdapter(list[BillReminder]),
}


class StoredData(BaseModel):
    """All record collections as loaded from storage."""

    expenses: list[Expense] = Field(default_factory=list)
    investments: list[Investment] = Field(default_factory=list)
    budgets: list[Budget] = Field(default_factory=list)
    savings_goals: list[SavingsGoal] = Field(default_factory=list)
    bill_reminders: list[BillReminder] = Field(default_factory=list)


def encode_collection(collection: str, records: Sequence[BaseModel]) -> bytes:
    """Encode a collection to JSON bytes."""
    return _ADAPTERS[collection].dump_json(list(records), indent=2)


def decode_collection(collection: str, raw: bytes | str) -> list:
    """Decode JSON bytes back into a list of records."""
    return _ADAPTERS[collection].validate_json(raw)


class Storage(Protocol):
    """What the workspace needs from persistence."""

    def load(self) -> StoredData: ...

    def save(self, collection: str, records: Sequence[BaseModel]) -> None: ...


class _CollectionStorage(ABC):
    """Shared load/save logic; subclasses supply raw byte access."""

    @abstractmethod
    def _read(self, collection: str) -> bytes | None:
        """Return the stored payload, or None if the collection was never saved."""

    @abstractmethod
    def _write(self, collection: str, payload: bytes) -> None: ...

    def load(self) -> StoredData:
        """Load every collection, defaulting unreadable ones to empty."""
        return StoredData(**{name: self._load_collection(name) for name in COLLECTIONS})

    def _load_collection(self, collection: str) -> list:
        try:
            raw = self._read(collection)
            if raw is None:
                return []
            return decode_collection(collection, raw)
        except (OSError, PydanticValidationError) as e:
            logger.warning("Could not load %s, starting empty: %s", collection, e)
            return []

    def save(self, collection: str, records: Sequence[BaseModel]) -> None:
        """Persist a whole collection. Failures are logged, not raised."""
        if collection not in _ADAPTERS:
            raise KeyError(f"Unknown collection: {collection}")
        try:
            self._write(collection, encode_collection(collection, records))
        except OSError as e:
            logger.warning("Could not save %s, changes kept in memory only: %s", collection, e)
            return
        logger.debug("Saved %d %s", len(records), collection)


class JsonStorage(_CollectionStorage):
    """One ``<collection>.json`` file per collection in a directory."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _read(self, collection: str) -> bytes | None:
        path = self.path_for(collection)
        if not path.exists():
            return None
        return path.read_bytes()

    def _write(self, collection: str, payload: bytes) -> None:
        path = self.path_for(collection)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_bytes(payload)
        tmp_path.replace(path)


class MemoryStorage(_CollectionStorage):
    """Keeps encoded collections in memory.

    Records still go through the JSON encoding, so behaviour matches
    ``JsonStorage`` without touching disk.
    """

    def __init__(self, blobs: dict[str, bytes] | None = None):
        self.blobs: dict[str, bytes] = dict(blobs or {})
        self.save_count = 0

    def _read(self, collection: str) -> bytes | None:
        return self.blobs.get(collection)

    def _write(self, collection: str, payload: bytes) -> None:
        self.blobs[collection] = payload
        self.save_count += 1
