"""
In-memory store of analyzed strings.

Records are keyed by the SHA-256 hash of their value and kept in insertion
order. A secondary value -> id index is maintained alongside the primary
mapping so lookups and deletes by value do not have to scan the collection.

Two distinct values that collide on the hash are treated as duplicates of
each other: the second one is rejected with ``DuplicateIdentityError``.
"""
import logging
import threading
from typing import Dict, List, Mapping, Optional, Union

from fastapi import Request

from string_analyzer.errors import DuplicateIdentityError
from string_analyzer.models import StringProperties, StringRecord

logger = logging.getLogger(__name__)


class StringStore:

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._ids_by_value: Dict[str, str] = {}
        # guards both dicts when the store is shared across threads
        self._lock = threading.Lock()

    def add(self, value: str, properties: Union[StringProperties, Mapping]) -> StringRecord:
        """Insert a new record; raises DuplicateIdentityError if its hash is already stored."""
        if not isinstance(properties, StringProperties):
            properties = StringProperties(**properties)
        record_id = properties.sha256_hash

        with self._lock:
            if record_id in self._records:
                logger.warning(f"Duplicate string rejected: {record_id}")
                raise DuplicateIdentityError("String already exists in the system")
            record = StringRecord(id=record_id, value=value, properties=properties)
            self._records[record_id] = record
            self._ids_by_value[value] = record_id

        logger.info(f"Stored string {record_id}")
        return record

    def get_by_value(self, value: str) -> Optional[StringRecord]:
        with self._lock:
            record_id = self._ids_by_value.get(value)
            if record_id is None:
                return None
            return self._records.get(record_id)

    def get_all(self) -> List[StringRecord]:
        """Return every record in insertion order"""
        with self._lock:
            return list(self._records.values())

    def delete_by_value(self, value: str) -> bool:
        with self._lock:
            record_id = self._ids_by_value.pop(value, None)
            if record_id is None:
                return False
            del self._records[record_id]

        logger.info(f"Deleted string {record_id}")
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._ids_by_value.clear()


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
