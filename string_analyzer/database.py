import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from fastapi import Request

from string_analyzer.errors import ConflictError, NotFoundError
from string_analyzer.models.string import StringRecord

logger = logging.getLogger(__name__)

Snapshot = Dict[str, StringRecord]


# ------------------------------------------------------------------------------
# STORE
# ------------------------------------------------------------------------------
class StringStore:
    """
    Content-addressed store of analyzed strings, keyed by record id.

    Every committed insert/delete calls ``on_mutate`` with a snapshot of the
    whole store. The hook runs while the lock is held, so two hook calls never
    overlap and a reader never sees a mutation whose hook has not finished.
    """

    def __init__(self, on_mutate: Optional[Callable[[Snapshot], None]] = None):
        self._records: Snapshot = {}
        self._lock = threading.Lock()
        self._on_mutate = on_mutate

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: str) -> bool:
        with self._lock:
            return record_id in self._records

    def load(self, records: Iterable[StringRecord]) -> None:
        """Replace the contents wholesale (startup reload, no hook)"""
        with self._lock:
            self._records = {record.id: record for record in records}
        logger.info(f"Loaded {len(self._records)} strings into the store")

    def snapshot(self) -> Snapshot:
        with self._lock:
            return dict(self._records)

    def insert(self, record: StringRecord) -> StringRecord:
        """Store a new record, stamping created_at with the insertion time"""
        record = record.model_copy(update={"created_at": datetime.now(timezone.utc)})
        with self._lock:
            if record.id in self._records:
                raise ConflictError("String already exists in the system")
            previous = dict(self._records)
            self._records[record.id] = record
            self._commit(previous)
        logger.info(f"Stored string {record.id[:12]}")
        return record

    def get(self, record_id: str) -> StringRecord:
        with self._lock:
            record = self._records.get(record_id)
        if record is None:
            raise NotFoundError("String does not exist in the system")
        return record

    def delete(self, record_id: str) -> None:
        with self._lock:
            if record_id not in self._records:
                raise NotFoundError("String does not exist in the system")
            previous = dict(self._records)
            del self._records[record_id]
            self._commit(previous)
        logger.info(f"Deleted string {record_id[:12]}")

    def list_all(self) -> List[StringRecord]:
        with self._lock:
            return list(self._records.values())

    def _commit(self, previous: Snapshot) -> None:
        """Run the hook; if it fails, put the records back as they were"""
        if self._on_mutate is None:
            return
        try:
            self._on_mutate(dict(self._records))
        except Exception:
            self._records = previous
            raise


# ------------------------------------------------------------------------------
# PERSISTENCE
# ------------------------------------------------------------------------------
class JsonFilePersistence:
    """Keeps the whole store as one flat ``{id: record}`` JSON document"""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[StringRecord]:
        if not os.path.exists(self.path):
            logger.warning(f"⚠️ {self.path} not found, starting with empty store.")
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                logger.error(f"❌ Error loading strings from {self.path}: expected a JSON object")
                return []
            return [StringRecord.model_validate(item) for item in data.values()]
        except (OSError, ValueError) as e:
            logger.error(f"❌ Error loading strings from {self.path}: {e}")
            return []

    def save(self, snapshot: Snapshot) -> None:
        data = {
            record_id: record.model_dump(mode="json")
            for record_id, record in snapshot.items()
        }
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"❌ Error saving strings to {self.path}: {e}")
            raise
        logger.debug(f"Saved {len(data)} strings to {self.path}")


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's string store."""
    return request.app.state.store
