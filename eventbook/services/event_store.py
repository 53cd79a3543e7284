"""In-memory event collection kept in step with its persisted slot.

Every mutation builds the next collection, writes it to the slot and only
then installs it in memory. A failed write therefore leaves both sides as
they were.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from threading import RLock

from django.utils import timezone

from eventbook.domain import Event, EventDraft, EventId
from eventbook.domain.errors import (
    EventNotFoundError,
    PersistenceReadError,
    PersistenceWriteError,
)
from eventbook.services.refresher import PastFlagRefresher
from eventbook.stores.interfaces import EventSlot

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class EventStore:
    """Owns the ordered event collection and every mutation entry point."""

    def __init__(
        self,
        slot: EventSlot,
        clock: Clock = timezone.now,
        refresh_interval: float = 60.0,
    ) -> None:
        self._slot = slot
        self._clock = clock
        self._events: tuple[Event, ...] = ()
        self._lock = RLock()
        self._refresher = PastFlagRefresher(self.recompute_past_flags, refresh_interval)

    def load(self) -> tuple[Event, ...]:
        """Replace the collection with the persisted one.

        Missing or unreadable data leaves the store empty; it is logged, never raised.
        """
        with self._lock:
            try:
                stored = self._slot.read()
            except PersistenceReadError as e:
                logger.warning(f"Discarding unreadable stored events: {e.reason}")
                stored = None
            self._events = tuple(stored or ())
            logger.info(f"Loaded {len(self._events)} events")
            try:
                self.recompute_past_flags()
            except PersistenceWriteError as e:
                logger.warning(f"Could not save refreshed past flags: {e.reason}")
                now = self._clock()
                self._events = tuple(event.with_past_flag(now) for event in self._events)
            return self._events

    @contextmanager
    def transaction(self) -> Iterator["EventStore"]:
        """Hold the store lock so a check and the mutation that depends on it run together."""
        with self._lock:
            yield self

    def list(self) -> tuple[Event, ...]:
        return self._events

    def get(self, event_id: EventId) -> Event:
        for event in self._events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id.value)

    def add(self, draft: EventDraft) -> Event:
        with self._lock:
            taken = {event.id for event in self._events}
            event = Event.from_draft(EventId.generate(taken), draft, self._clock())
            self._commit(self._events + (event,))
            logger.info(f"Added event {event.id} at {event.venue!r} on {event.date}")
            return event

    def update(self, event_id: EventId, draft: EventDraft) -> Event:
        with self._lock:
            index = self._index_of(event_id)
            event = Event.from_draft(event_id, draft, self._clock())
            events = list(self._events)
            events[index] = event
            self._commit(tuple(events))
            logger.info(f"Updated event {event_id}")
            return event

    def delete(self, event_id: EventId) -> None:
        with self._lock:
            index = self._index_of(event_id)
            self._commit(self._events[:index] + self._events[index + 1:])
            logger.info(f"Deleted event {event_id}")

    def recompute_past_flags(self) -> bool:
        """Refresh every ``is_past`` flag; persist only when one changed."""
        with self._lock:
            now = self._clock()
            refreshed = tuple(event.with_past_flag(now) for event in self._events)
            changed = sum(
                1 for old, new in zip(self._events, refreshed) if old.is_past != new.is_past
            )
            if not changed:
                return False
            self._commit(refreshed)
            logger.debug(f"Marked {changed} events with a new past flag")
            return True

    def start(self) -> None:
        self._refresher.start()

    def stop(self) -> None:
        self._refresher.stop()

    @property
    def running(self) -> bool:
        return self._refresher.running

    def _index_of(self, event_id: EventId) -> int:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        raise EventNotFoundError(event_id.value)

    def _commit(self, events: tuple[Event, ...]) -> None:
        self._slot.write(events)
        self._events = events
