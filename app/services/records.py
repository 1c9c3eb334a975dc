from typing import Optional, Union

from ..core.settings import Settings
from ..models.record import Record
from .cache import LookupCache, NullCache
from .store import RecordStore


class RecordService:
    """What the HTTP layer calls: writes go to the store, reads go through the cache."""

    def __init__(self, store: RecordStore, cache: Optional[Union[LookupCache, NullCache]] = None):
        self.store = store
        self.cache = cache if cache is not None else NullCache()

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordService":
        if settings.cache_enabled:
            cache = LookupCache(
                capacity=settings.cache_capacity,
                negative_ttl=settings.cache_negative_ttl,
            )
        else:
            cache = NullCache()
        return cls(RecordStore(), cache)

    @property
    def cache_enabled(self) -> bool:
        return not isinstance(self.cache, NullCache)

    def put(self, record: Record) -> None:
        self.store.put(record)
        # a write is not complete until stale cache state for its id is gone
        self.cache.invalidate(record.id)

    def get(self, record_id: str) -> Record:
        return self.cache.get_or_populate(record_id, self.store.get)
