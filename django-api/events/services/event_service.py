"""Event service - all business logic lives here.

Services:
- Depend only on the store
- Validate authored fields before anything is persisted
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from events.domain import Capacity, Event, EventStatus, Money, NewEvent
from events.domain.errors import EventNotFoundError, EventValidationError
from events.stores.event_store import EventStore

logger = logging.getLogger(__name__)

MAX_TICKETS_PER_BOOKING = 10

EDITABLE_FIELDS = (
    "title",
    "description",
    "date",
    "time",
    "venue",
    "price",
    "max_tickets",
    "category",
    "status",
    "image",
)


def timestamp_id() -> str:
    """Millisecond timestamp id, as the admin console has always assigned."""
    return str(time.time_ns() // 1_000_000)


def validate_event_fields(fields: Mapping[str, Any]) -> None:
    """Check the rules an authored event must satisfy.

    Raises:
        EventValidationError: On the first rule that fails.
    """
    for name, label in (("title", "Title"), ("date", "Date"), ("time", "Time")):
        if not str(fields.get(name) or "").strip():
            raise EventValidationError(f"{label} is required")
    if Decimal(fields.get("price", 0)) < 0:
        raise EventValidationError("Price must be >= 0")
    if int(fields.get("max_tickets", 0)) <= 0:
        raise EventValidationError("Max tickets must be > 0")


def _to_domain_values(fields: Mapping[str, Any]) -> dict[str, Any]:
    values = dict(fields)
    if "price" in values:
        values["price"] = Money(amount=Decimal(values["price"]))
    if "max_tickets" in values:
        values["max_tickets"] = Capacity(value=int(values["max_tickets"]))
    if "status" in values:
        values["status"] = EventStatus(values["status"])
    return values


def _to_raw_values(event: Event) -> dict[str, Any]:
    return {
        "title": event.title,
        "description": event.description,
        "date": event.date,
        "time": event.time,
        "venue": event.venue,
        "price": event.price.amount,
        "max_tickets": event.max_tickets.value,
        "category": event.category,
        "status": event.status.value,
        "image": event.image,
    }


@dataclass(frozen=True)
class DashboardStats:
    """Aggregates shown on the admin dashboard."""

    total_events: int
    active_events: int
    total_sales: Decimal
    total_tickets_sold: int
    total_capacity: int
    occupancy_rate: float


class EventService:
    """Service for event catalog and admin console operations."""

    def __init__(
        self,
        store: EventStore,
        id_factory: Callable[[], str] = timestamp_id,
    ) -> None:
        self._store = store
        self._id_factory = id_factory

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.get_all()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_bookable_event(self, event_id: str, quantity: int) -> Event:
        """Return the event if quantity tickets can still be booked for it.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventValidationError: If quantity exceeds the per-booking limit or
                the tickets still available.
        """
        event = self.get_event(event_id)
        if quantity > MAX_TICKETS_PER_BOOKING:
            raise EventValidationError(
                f"At most {MAX_TICKETS_PER_BOOKING} tickets can be booked at once"
            )
        available = max(event.available_tickets, 0)
        if quantity > available:
            raise EventValidationError(f"Only {available} tickets available")
        return event

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Create an active event with no tickets sold.

        Raises:
            EventValidationError: If a field rule fails; nothing is stored.
        """
        validate_event_fields(fields)
        values = _to_domain_values(
            {name: fields[name] for name in EDITABLE_FIELDS if name in fields}
        )
        values.setdefault("price", Money(amount=Decimal(0)))
        values.setdefault("status", EventStatus.ACTIVE)
        values.setdefault("description", "")
        values.setdefault("venue", "")
        values.setdefault("category", "")
        event = self._store.add(
            NewEvent(
                id=self._id_factory(),
                sold_tickets=Capacity(value=0),
                **values,
            )
        )
        logger.info("Created event %s (%s)", event.id, event.title)
        return event

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Overwrite the given fields of an event.

        The merged result is validated as a whole, so a partial change is
        checked against the event's current values.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventValidationError: If a field rule fails; nothing is stored.
        """
        current = self.get_event(event_id)
        accepted = {name: changes[name] for name in EDITABLE_FIELDS if name in changes}
        validate_event_fields(_to_raw_values(current) | accepted)
        updated = self._store.update(event_id, **_to_domain_values(accepted))
        logger.info("Updated event %s fields %s", event_id, sorted(accepted))
        return updated

    def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        self.get_event(event_id)
        self._store.remove(event_id)
        logger.info("Deleted event %s", event_id)

    def dashboard(self) -> DashboardStats:
        store = self._store
        return DashboardStats(
            total_events=len(store.get_all()),
            active_events=store.active_count(),
            total_sales=store.total_sales(),
            total_tickets_sold=store.total_tickets_sold(),
            total_capacity=store.total_capacity(),
            occupancy_rate=store.occupancy_rate(),
        )
