"""Django cache implementation of the EventSlot.

The whole collection lives under one key, serialized as JSON.
"""

import logging
from collections.abc import Sequence

from django.core.cache import caches

from eventbook.domain import Event
from eventbook.domain.errors import PersistenceReadError, PersistenceWriteError
from eventbook.stores.interfaces import EventSlot
from eventbook.stores.records import decode_events, encode_events

logger = logging.getLogger(__name__)


class CacheEventSlot(EventSlot):
    """Event slot stored under a single key of a Django cache alias."""

    def __init__(self, key: str = "events", alias: str = "default") -> None:
        self.key = key
        self.alias = alias

    @property
    def _cache(self):
        return caches[self.alias]

    def read(self) -> list[Event] | None:
        try:
            raw = self._cache.get(self.key)
        except Exception as exc:
            logger.error(f"Failed to read events from cache {self.alias!r}: {exc}")
            raise PersistenceReadError(str(exc)) from exc
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise PersistenceReadError(f"unexpected {type(raw).__name__} under {self.key!r}")
        return decode_events(raw)

    def write(self, events: Sequence[Event]) -> None:
        payload = encode_events(events)
        try:
            self._cache.set(self.key, payload, timeout=None)
        except Exception as exc:
            logger.error(f"Failed to write events to cache {self.alias!r}: {exc}")
            raise PersistenceWriteError(str(exc)) from exc
        logger.debug(f"Wrote {len(events)} events to {self.alias}:{self.key}")
