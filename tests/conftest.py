"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient, APIRequestFactory

from eventbook.services import EventService, EventStore, EventValidator
from eventbook.stores import CacheEventSlot


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def api_factory() -> APIRequestFactory:
    return APIRequestFactory()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2030, 6, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def slot() -> CacheEventSlot:
    return CacheEventSlot(key="events")


@pytest.fixture
def store(slot, clock):
    store = EventStore(slot, clock=clock)
    store.load()
    yield store
    store.stop()


@pytest.fixture
def validator(store, clock) -> EventValidator:
    return EventValidator(store, clock=clock)


@pytest.fixture
def service(store, validator) -> EventService:
    return EventService(store, validator)


@pytest.fixture
def launch_data() -> dict:
    return {
        "title": "Launch",
        "description": "Product launch event",
        "venue": "Main Hall",
        "date": "2099-01-01",
    }


@pytest.fixture
def corrupt_file_slot(settings, tmp_path) -> CacheEventSlot:
    """A slot on a file-based cache whose entry has been overwritten with junk."""
    settings.CACHES = {
        **settings.CACHES,
        "files": {
            "BACKEND": "django.core.cache.backends.filebased.FileBasedCache",
            "LOCATION": str(tmp_path),
        },
    }
    slot = CacheEventSlot(key="events", alias="files")
    slot.write([])
    [entry] = tmp_path.glob("*.djcache")
    entry.write_bytes(b"garbage-not-zlib")
    return slot
