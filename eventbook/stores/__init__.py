from eventbook.stores.cache_slot import CacheEventSlot
from eventbook.stores.interfaces import EventSlot

__all__ = ["CacheEventSlot", "EventSlot"]
