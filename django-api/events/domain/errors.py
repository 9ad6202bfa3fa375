"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    CORRUPT_SNAPSHOT = "CORRUPT_SNAPSHOT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"


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
    """Raised when an authored event breaks a field rule."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)


class CorruptSnapshotError(DomainError):
    """Raised when the persisted event collection cannot be decoded."""

    def __init__(self, key: str) -> None:
        super().__init__(
            code=ErrorCode.CORRUPT_SNAPSHOT,
            message="Stored events could not be read",
        )
        self.key = key


class InvalidCredentialsError(DomainError):
    """Raised when the admin console login does not match."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid credentials",
        )
