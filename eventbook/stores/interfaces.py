"""Store interfaces (repository pattern).

Slots must be swappable and speak domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from eventbook.domain import Event


class EventSlot(ABC):
    """Interface for the single persisted slot holding every event."""

    @abstractmethod
    def read(self) -> list[Event] | None:
        """Return the stored events in order, or None if nothing is stored.

        Raises:
            PersistenceReadError: If the stored content is malformed.
        """
        ...

    @abstractmethod
    def write(self, events: Sequence[Event]) -> None:
        """Replace the stored collection with ``events``.

        Raises:
            PersistenceWriteError: If the collection could not be saved.
        """
        ...
