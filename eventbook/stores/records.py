"""Codec between Event models and the serialized record list.

Records use the camelCase keys of the browser version so existing
exports load unchanged.
"""

import json
from collections.abc import Sequence
from datetime import date, time
from typing import Any

from eventbook.domain import Capacity, Event, EventId
from eventbook.domain.errors import PersistenceReadError

TIME_FORMAT = "%H:%M"


def to_record(event: Event) -> dict[str, Any]:
    return {
        "id": event.id.value,
        "title": event.title,
        "description": event.description,
        "venue": event.venue,
        "date": event.date.isoformat(),
        "time": event.time.strftime(TIME_FORMAT) if event.time else None,
        "organizer": event.organizer,
        "capacity": event.capacity.value if event.capacity else None,
        "isPast": event.is_past,
    }


def _optional_str(record: dict[str, Any], key: str) -> str | None:
    value = record.get(key)
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def from_record(record: dict[str, Any]) -> Event:
    """Build an Event from one stored record.

    Raises:
        PersistenceReadError: If a field is missing or has the wrong type.
    """
    if not isinstance(record, dict):
        raise PersistenceReadError("record is not an object")
    try:
        raw_time = _optional_str(record, "time")
        capacity = record.get("capacity")
        if isinstance(capacity, bool) or not isinstance(capacity, (int, float, type(None))):
            raise TypeError("capacity must be a number")
        if isinstance(capacity, float) and not capacity.is_integer():
            raise ValueError("capacity must be a whole number")
        return Event(
            id=EventId.from_string(str(record["id"])),
            title=str(record["title"]),
            description=str(record["description"]),
            venue=str(record["venue"]),
            date=date.fromisoformat(record["date"]),
            time=time.fromisoformat(raw_time) if raw_time else None,
            organizer=_optional_str(record, "organizer"),
            capacity=Capacity(int(capacity)) if capacity is not None else None,
            is_past=bool(record.get("isPast", False)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise PersistenceReadError(f"invalid record: {exc}") from exc


def encode_events(events: Sequence[Event]) -> str:
    return json.dumps([to_record(event) for event in events])


def decode_events(raw: str) -> list[Event]:
    """Parse a serialized collection.

    Raises:
        PersistenceReadError: On invalid JSON, a non-list payload, a bad
            record or a repeated id.
    """
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise PersistenceReadError(f"invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise PersistenceReadError("stored value is not a list")

    events = [from_record(record) for record in payload]
    seen: set[EventId] = set()
    for event in events:
        if event.id in seen:
            raise PersistenceReadError(f"duplicate event id {event.id}")
        seen.add(event.id)
    return events
