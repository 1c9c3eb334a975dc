"""
Read-through lookup cache that sits in front of the record store.

Positive entries are bounded by an LRU capacity. Absent ids may also be
cached for a short time (``negative_ttl``) so repeated misses for the same id
do not all hit the store. ``invalidate`` must run as part of every write;
once it returns, no reader can be served an entry older than that write.

Loads run outside the cache lock. Each miss registers a load token for its
id and ``invalidate`` drops the token, so a load that raced a write finds
its token gone and throws its result away instead of caching it.
"""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ..core.errors import RecordNotFoundError
from ..core.logging import get_logger
from ..models.record import Record

log = get_logger(__name__)

Loader = Callable[[str], Record]


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    evictions: int
    invalidations: int
    size: int
    capacity: int


@dataclass(frozen=True)
class _Entry:
    # record is None for a cached absence
    record: Optional[Record]
    expires_at: Optional[float] = None


class LookupCache:
    def __init__(
        self,
        capacity: int = 1000,
        negative_ttl: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        if negative_ttl < 0:
            raise ValueError(f"negative_ttl must be >= 0, got {negative_ttl}")
        self.capacity = capacity
        self.negative_ttl = negative_ttl
        self.clock = clock
        self.data: "OrderedDict[str, _Entry]" = OrderedDict()
        self.loading: Dict[str, object] = {}
        self.lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        self.evictions = 0
        self.invalidations = 0

    def get_or_populate(self, record_id: str, loader: Loader) -> Record:
        """Return the record for ``record_id``, calling ``loader`` on a miss.

        Raises RecordNotFoundError when the id is absent, whether that came
        from the loader or from a cached absence.
        """
        with self.lock:
            entry = self._lookup(record_id)
            if entry is None:
                self.misses += 1
                token = object()
                self.loading[record_id] = token
            else:
                self.hits += 1

        if entry is not None:
            if entry.record is None:
                raise RecordNotFoundError(record_id)
            return entry.record.model_copy()

        fill: Optional[_Entry] = None
        try:
            record = loader(record_id)
            fill = _Entry(record.model_copy())
            return record
        except RecordNotFoundError:
            if self.negative_ttl > 0:
                fill = _Entry(None, self.clock() + self.negative_ttl)
            raise
        finally:
            self._settle(record_id, token, fill)

    def invalidate(self, record_id: str) -> None:
        with self.lock:
            self.data.pop(record_id, None)
            self.loading.pop(record_id, None)
            self.invalidations += 1

    def clear(self) -> None:
        with self.lock:
            self.data.clear()
            self.loading.clear()

    def stats(self) -> CacheStats:
        with self.lock:
            return CacheStats(
                hits=self.hits,
                misses=self.misses,
                evictions=self.evictions,
                invalidations=self.invalidations,
                size=len(self.data),
                capacity=self.capacity,
            )

    def __len__(self) -> int:
        with self.lock:
            return len(self.data)

    def _lookup(self, record_id: str) -> Optional[_Entry]:
        # caller holds self.lock
        entry = self.data.get(record_id)
        if entry is None:
            return None
        if entry.expires_at is not None and entry.expires_at <= self.clock():
            del self.data[record_id]
            return None
        self.data.move_to_end(record_id)
        return entry

    def _settle(self, record_id: str, token: object, fill: Optional[_Entry]) -> None:
        evicted = []
        with self.lock:
            if self.loading.get(record_id) is not token:
                # invalidated, or superseded by a newer load of the same id
                return
            del self.loading[record_id]
            if fill is None:
                return
            self.data[record_id] = fill
            self.data.move_to_end(record_id)
            while len(self.data) > self.capacity:
                key, _ = self.data.popitem(last=False)
                evicted.append(key)
            self.evictions += len(evicted)
        for key in evicted:
            log.debug("Evicted %r from lookup cache", key)


class NullCache:
    """Pass-through stand-in for LookupCache: every read goes to the loader."""

    capacity = 0

    def get_or_populate(self, record_id: str, loader: Loader) -> Record:
        return loader(record_id)

    def invalidate(self, record_id: str) -> None:
        pass

    def clear(self) -> None:
        pass

    def stats(self) -> CacheStats:
        return CacheStats(hits=0, misses=0, evictions=0, invalidations=0, size=0, capacity=0)

    def __len__(self) -> int:
        return 0
