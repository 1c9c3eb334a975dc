import random

import pytest

from app.core.errors import DuplicateIdError, RecordNotFoundError
from app.core.settings import Settings
from app.models.record import Record
from app.services.cache import LookupCache, NullCache
from app.services.records import RecordService
from app.services.store import RecordStore


def make_service(cache_enabled: bool) -> RecordService:
    return RecordService.from_settings(Settings(cache_enabled=cache_enabled, cache_capacity=4))


def run_ops(service: RecordService, ops):
    observed = []
    for op, payload in ops:
        try:
            if op == "put":
                service.put(payload)
                observed.append(("put", "ok"))
            else:
                observed.append(("get", service.get(payload).model_dump()))
        except DuplicateIdError as e:
            observed.append((op, "duplicate", e.record_id))
        except RecordNotFoundError as e:
            observed.append((op, "not_found", e.record_id))
    return observed


def test_example_flow():
    service = make_service(cache_enabled=True)
    up = Record(id="m1", name="Up", year=2009, flag=True)

    service.put(up)
    assert service.get("m1") == up
    with pytest.raises(DuplicateIdError):
        service.put(Record(id="m1", name="Other", year=1, flag=False))
    assert service.get("m1") == up
    with pytest.raises(RecordNotFoundError):
        service.get("m2")


def test_from_settings_picks_cache_implementation():
    assert isinstance(make_service(True).cache, LookupCache)
    assert isinstance(make_service(False).cache, NullCache)
    assert make_service(True).cache_enabled
    assert not make_service(False).cache_enabled


def test_read_after_write_is_never_stale_even_after_cached_miss():
    service = make_service(cache_enabled=True)
    with pytest.raises(RecordNotFoundError):
        service.get("A")

    record = Record(id="A", name="Alien", year=1979, flag=True)
    service.put(record)
    assert service.get("A") == record


def test_failed_put_does_not_touch_cache():
    service = make_service(cache_enabled=True)
    service.put(Record(id="m1", name="Up", year=2009, flag=True))
    service.get("m1")
    before = service.cache.stats()

    with pytest.raises(DuplicateIdError):
        service.put(Record(id="m1", name="Up", year=2009, flag=True))
    assert service.cache.stats().invalidations == before.invalidations


def test_cache_enabled_and_disabled_observe_identical_results():
    rng = random.Random(1234)
    ids = [f"m{i}" for i in range(8)]
    ops = []
    for n in range(300):
        rid = rng.choice(ids)
        if rng.random() < 0.3:
            ops.append(("put", Record(id=rid, name=f"n{n}", year=rng.randint(0, 65535), flag=rng.random() < 0.5)))
        else:
            ops.append(("get", rid))

    cached = run_ops(make_service(cache_enabled=True), ops)
    uncached = run_ops(make_service(cache_enabled=False), ops)
    assert cached == uncached


def test_service_defaults_to_pass_through_cache():
    service = RecordService(RecordStore())
    assert isinstance(service.cache, NullCache)
