from eventbook.domain.models import Event, EventDraft, is_past_at
from eventbook.domain.value_objects import Capacity, EventId

__all__ = [
    "Event",
    "EventDraft",
    "EventId",
    "Capacity",
    "is_past_at",
]
