from eventbook.services.event_service import EventService
from eventbook.services.event_store import EventStore
from eventbook.services.refresher import PastFlagRefresher
from eventbook.services.validator import EventValidator

__all__ = ["EventService", "EventStore", "EventValidator", "PastFlagRefresher"]
