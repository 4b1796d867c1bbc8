import logging
import threading
from typing import List

from errors import ConflictError, NotFoundError
from models import AnalyzedString

logger = logging.getLogger(__name__)


class StringStore:
    """In-memory collection of analyzed strings, keyed by exact value.

    Records keep insertion order. Every operation holds the lock, since
    FastAPI runs sync endpoints on a worker threadpool.
    """

    def __init__(self):
        self._records: List[AnalyzedString] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, value: str) -> bool:
        with self._lock:
            return self._index_of(value) is not None

    def _index_of(self, value: str):
        for idx, record in enumerate(self._records):
            if record.value == value:
                return idx
        return None

    def insert(self, record: AnalyzedString) -> AnalyzedString:
        with self._lock:
            if self._index_of(record.value) is not None:
                logger.warning("Rejected duplicate string %s", record.id)
                raise ConflictError("String already exists in the system")
            self._records.append(record)
        logger.info("Stored string %s", record.id)
        return record

    def find_by_value(self, value: str) -> AnalyzedString:
        with self._lock:
            idx = self._index_of(value)
            if idx is None:
                raise NotFoundError("String does not exist in the system")
            return self._records[idx]

    def delete_by_value(self, value: str) -> AnalyzedString:
        with self._lock:
            idx = self._index_of(value)
            if idx is None:
                raise NotFoundError("String does not exist in the system")
            record = self._records.pop(idx)
        logger.info("Deleted string %s", record.id)
        return record

    def list_all(self) -> List[AnalyzedString]:
        with self._lock:
            return list(self._records)
