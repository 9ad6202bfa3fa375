"""Event collection with whole-snapshot persistence and change notification.

Every mutation is a synchronous read-modify-persist-notify sequence, held
under a per-store lock so threads in one process apply their changes one at
a time. The whole collection is rewritten to the slot each time; there is no
delta log and no coordination between processes sharing the same slot, so
writers in different processes overwrite each other's snapshot.
"""

import dataclasses
import logging
import threading
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from django.dispatch import Signal
from django.utils import timezone

from events.domain import Capacity, Event, EventStatus, NewEvent
from events.domain.codec import dumps_events, loads_events
from events.domain.errors import CorruptSnapshotError
from events.signals import events_changed
from events.stores.interfaces import KeyValueStorage

logger = logging.getLogger(__name__)

Subscriber = Callable[[list[Event]], None]

DEFAULT_KEY = "events"

_IMMUTABLE_FIELDS = ("id", "created_at")


class EventStore:
    """Authoritative in-process collection of events."""

    def __init__(
        self,
        storage: KeyValueStorage,
        seed: Callable[[], list[Event]],
        *,
        key: str = DEFAULT_KEY,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock
        self._changed = Signal()
        self._lock = threading.RLock()

        raw = storage.get_item(key)
        if raw is not None:
            try:
                self._events = loads_events(raw)
            except (ValueError, KeyError, TypeError) as exc:
                raise CorruptSnapshotError(key) from exc
            logger.info("Restored %d events from slot %r", len(self._events), key)
        else:
            self._events = list(seed())
            self._persist()
            logger.info("Seeded slot %r with %d events", key, len(self._events))

    def get_all(self) -> list[Event]:
        """Return a copy of the collection in storage order."""
        return list(self._events)

    def get_by_id(self, event_id: str) -> Event | None:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def add(self, new_event: NewEvent) -> Event:
        """Append an event, stamping created_at and updated_at.

        Ids are taken as given; a duplicate id is not rejected.
        """
        fields = {f.name: getattr(new_event, f.name) for f in dataclasses.fields(new_event)}
        with self._lock:
            now = self._clock()
            event = Event(
                **fields,
                created_at=now,
                updated_at=now,
            )
            self._events = [*self._events, event]
            self._commit(event.id)
        return event

    def update(self, event_id: str, **changes) -> Event | None:
        """Merge changes into the matching event and refresh updated_at.

        An unknown id leaves the collection as it was, but the snapshot is
        still persisted and subscribers still notified.
        """
        for name in _IMMUTABLE_FIELDS:
            changes.pop(name, None)

        updated = None
        with self._lock:
            events = []
            for event in self._events:
                if event.id == event_id:
                    event = dataclasses.replace(event, **changes, updated_at=self._clock())
                    updated = event
                events.append(event)
            self._events = events
            self._commit(event_id)
        return updated

    def remove(self, event_id: str) -> None:
        with self._lock:
            self._events = [event for event in self._events if event.id != event_id]
            self._commit(event_id)

    def record_sale(self, event_id: str, quantity: int) -> Event | None:
        """Add quantity to an event's sold tickets.

        Capacity is not checked and status is left alone.
        """
        if quantity <= 0:
            raise ValueError("Sale quantity must be positive")
        with self._lock:
            event = self.get_by_id(event_id)
            if event is None:
                return None
            sold = Capacity(value=event.sold_tickets.value + quantity)
            return self.update(event_id, sold_tickets=sold)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register callback and call it right away with the current snapshot.

        Returns a function that removes the registration.
        """

        def receiver(sender, events: list[Event], **kwargs) -> None:
            callback(list(events))

        self._changed.connect(receiver, weak=False)
        callback(self.get_all())

        def unsubscribe() -> None:
            self._changed.disconnect(receiver)

        return unsubscribe

    # Analytics, computed on demand.

    def total_sales(self) -> Decimal:
        return sum(
            (e.price.amount * e.sold_tickets.value for e in self._events),
            Decimal(0),
        )

    def total_tickets_sold(self) -> int:
        return sum(e.sold_tickets.value for e in self._events)

    def total_capacity(self) -> int:
        return sum(e.max_tickets.value for e in self._events)

    def occupancy_rate(self) -> float:
        capacity = self.total_capacity()
        if capacity == 0:
            return 0.0
        return self.total_tickets_sold() / capacity * 100

    def active_count(self) -> int:
        return sum(1 for e in self._events if e.status is EventStatus.ACTIVE)

    def _persist(self) -> None:
        self._storage.set_item(self._key, dumps_events(self._events))

    def _commit(self, event_id: str) -> None:
        self._persist()
        logger.debug("Persisted %d events after change to %s", len(self._events), event_id)
        snapshot = self.get_all()
        self._changed.send(sender=self.__class__, events=snapshot)
        events_changed.send(sender=self.__class__, events=snapshot, event_id=event_id)
