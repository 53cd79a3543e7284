"""Domain error codes for the eventbook module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    PERSISTENCE_READ_FAILED = "PERSISTENCE_READ_FAILED"
    PERSISTENCE_WRITE_FAILED = "PERSISTENCE_WRITE_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class EventValidationError(DomainError):
    """Raised when submitted event data breaks a field or collision rule.

    ``errors`` maps each offending field to its messages.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Invalid event data",
        )
        self.errors = errors


class PersistenceReadError(DomainError):
    """Raised when the persisted collection cannot be read or decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_READ_FAILED,
            message="Stored events could not be read",
        )
        self.reason = reason


class PersistenceWriteError(DomainError):
    """Raised when the collection cannot be written back."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_WRITE_FAILED,
            message="Events could not be saved",
        )
        self.reason = reason
