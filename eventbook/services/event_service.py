"""Event service - all business logic lives here.

Services:
- Depend only on the store and validator they are given
- Validate domain invariants before any mutation
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

from collections.abc import Mapping
from typing import Any

from eventbook.domain import Event, EventId
from eventbook.domain.errors import EventNotFoundError
from eventbook.services.event_store import EventStore
from eventbook.services.validator import EventValidator


def _parse_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError as exc:
        raise EventNotFoundError(event_id) from exc


class EventService:
    """Service for event bookkeeping operations."""

    def __init__(self, store: EventStore, validator: EventValidator | None = None) -> None:
        self._store = store
        self._validator = validator or EventValidator(store)

    @property
    def store(self) -> EventStore:
        return self._store

    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        return list(self._store.list())

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        return self._store.get(_parse_id(event_id))

    def create_event(self, data: Mapping[str, Any]) -> Event:
        """Validate ``data`` and add it as a new event.

        Raises:
            EventValidationError: If a field rule fails or the venue is taken that day.
        """
        with self._store.transaction() as store:
            draft = self._validator.validate(data)
            return store.add(draft)

    def update_event(self, event_id: str, data: Mapping[str, Any]) -> Event:
        """Replace the fields of an existing event.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventValidationError: If a field rule fails or another event holds the slot.
        """
        with self._store.transaction() as store:
            existing = self.get_event(event_id)
            draft = self._validator.validate(data, exclude_id=existing.id)
            return store.update(existing.id, draft)

    def delete_event(self, event_id: str) -> None:
        """Remove an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        self._store.delete(_parse_id(event_id))
