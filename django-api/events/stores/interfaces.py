"""Store interfaces.

The event collection lives in one named slot of a key/value backend.
Backends must be swappable so tests can run against an in-memory fake.
"""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Interface for a string-valued key/value slot store."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None if the slot is empty."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Overwrite the slot with value."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Empty the slot. Removing an empty slot is not an error."""
        ...
