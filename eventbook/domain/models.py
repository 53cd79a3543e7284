"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Input rules live in services/validator.py.
"""

import datetime as dt
from dataclasses import dataclass, replace
from typing import Self

from django.utils import timezone

from eventbook.domain.value_objects import Capacity, EventId


def is_past_at(event_date: dt.date, now: dt.datetime) -> bool:
    """Return True once the day of ``event_date`` has started relative to ``now``."""
    starts_at = timezone.make_aware(dt.datetime.combine(event_date, dt.time.min))
    return starts_at < now


@dataclass(frozen=True)
class EventDraft:
    """The user-editable fields of an Event, already validated."""

    title: str
    description: str
    venue: str
    date: dt.date
    time: dt.time | None = None
    organizer: str | None = None
    capacity: Capacity | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    venue: str
    date: dt.date
    time: dt.time | None
    organizer: str | None
    capacity: Capacity | None
    is_past: bool

    @classmethod
    def from_draft(cls, event_id: EventId, draft: EventDraft, now: dt.datetime) -> Self:
        return cls(
            id=event_id,
            title=draft.title,
            description=draft.description,
            venue=draft.venue,
            date=draft.date,
            time=draft.time,
            organizer=draft.organizer,
            capacity=draft.capacity,
            is_past=is_past_at(draft.date, now),
        )

    def with_past_flag(self, now: dt.datetime) -> Self:
        """Return this event with ``is_past`` recomputed for ``now``."""
        is_past = is_past_at(self.date, now)
        if is_past == self.is_past:
            return self
        return replace(self, is_past=is_past)
