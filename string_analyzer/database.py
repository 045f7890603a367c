import json
import logging
import os
import tempfile
import threading
from typing import Dict, List, Optional

from pydantic import ValidationError

from string_analyzer import config
from string_analyzer.errors import AlreadyExists, StorageFailure
from string_analyzer.models import StringRecord

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# JSON FILE STORE
# ------------------------------------------------------------------------------
class JsonFileStore:
    """
    Whole-file JSON store mapping record id -> record.

    The file is loaded once into memory and rewritten on every insert
    or remove (write-through). Writes are serialized with a lock; there
    is no coordination between processes.
    """

    def __init__(self, path: str):
        self.path = path
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def load(self) -> None:
        directory = os.path.dirname(self.path) or "."
        try:
            os.makedirs(directory, exist_ok=True)
            if not os.path.exists(self.path):
                logger.info(f"Creating empty store at {self.path}")
                self._write({})
                self._records = {}
                return

            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
            data = json.loads(raw) if raw.strip() else {}
            if not isinstance(data, dict):
                raise StorageFailure(f"Store file {self.path} does not hold a JSON object")
            self._records = {
                record_id: StringRecord.model_validate(item)
                for record_id, item in data.items()
            }
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to load store file {self.path}: {e}")
            raise StorageFailure(f"Failed to load store file: {e}") from e

        logger.info(f"Loaded {len(self._records)} records from {self.path}")

    def find(self, record_id: str) -> Optional[StringRecord]:
        return self._records.get(record_id)

    def insert(self, record: StringRecord) -> None:
        with self._lock:
            if record.id in self._records:
                raise AlreadyExists()
            self._records[record.id] = record
            try:
                self._save()
            except StorageFailure:
                del self._records[record.id]
                raise

    def remove(self, record_id: str) -> bool:
        with self._lock:
            record = self._records.pop(record_id, None)
            if record is None:
                return False
            try:
                self._save()
            except StorageFailure:
                self._records[record_id] = record
                raise
            return True

    def list_all(self) -> List[StringRecord]:
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def _save(self) -> None:
        payload = {
            record_id: record.model_dump(mode="json")
            for record_id, record in self._records.items()
        }
        try:
            self._write(payload)
        except OSError as e:
            logger.error(f"Failed to write store file {self.path}: {e}")
            raise StorageFailure(f"Failed to write store file: {e}") from e

    def _write(self, payload: dict) -> None:
        directory = os.path.dirname(self.path) or "."
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".strings-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
_store: Optional[JsonFileStore] = None


def init_db(path: Optional[str] = None) -> JsonFileStore:
    """Load the store from disk (runs once on startup)."""
    global _store
    store = JsonFileStore(path or config.DATABASE_FILE)
    store.load()
    _store = store
    return _store


def get_store() -> JsonFileStore:
    """Dependency to provide the record store."""
    if _store is None:
        return init_db()
    return _store
