"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
The serialized layout they are stored in lives in domain/codec.py.
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import Capacity, EventStatus, Money


@dataclass(frozen=True)
class NewEvent:
    """An event as authored, before the store stamps its timestamps."""

    id: str
    title: str
    description: str
    date: str
    time: str
    venue: str
    price: Money
    max_tickets: Capacity
    sold_tickets: Capacity
    category: str
    status: EventStatus
    image: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: str
    title: str
    description: str
    date: str
    time: str
    venue: str
    price: Money
    max_tickets: Capacity
    sold_tickets: Capacity
    category: str
    status: EventStatus
    created_at: datetime
    updated_at: datetime
    image: str | None = None

    @property
    def available_tickets(self) -> int:
        # Sold may exceed capacity; nothing enforces it.
        return self.max_tickets.value - self.sold_tickets.value
