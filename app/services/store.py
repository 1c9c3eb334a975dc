import threading
from typing import Dict

from ..core.errors import DuplicateIdError, RecordNotFoundError
from ..core.logging import get_logger
from ..models.record import Record

log = get_logger(__name__)


class RecordStore:
    """Authoritative in-memory mapping from record id to record.

    A single lock guards the whole mapping, so every ``put`` and ``get`` is
    linearizable. Nothing blocking happens while the lock is held.
    """

    def __init__(self):
        self.data: Dict[str, Record] = {}
        self.lock = threading.Lock()

    def put(self, record: Record) -> None:
        with self.lock:
            exists = record.id in self.data
            if not exists:
                self.data[record.id] = record.model_copy()
                size = len(self.data)
        if exists:
            log.info("Rejected duplicate record id %r", record.id)
            raise DuplicateIdError(record.id)
        log.debug("Added record %r (%s), store now holds %d", record.id, record.name, size)

    def get(self, record_id: str) -> Record:
        with self.lock:
            record = self.data.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record.model_copy()

    def __contains__(self, record_id: object) -> bool:
        with self.lock:
            return record_id in self.data

    def __len__(self) -> int:
        with self.lock:
            return len(self.data)
