"""Unit tests for EventStore.

These run against the in-memory slot storage; no cache or HTTP involved.
Run with: pytest tests/test_store.py -v
"""

import threading
from datetime import datetime
from decimal import Decimal

import pytest

from conftest import TickingClock, make_new_event
from events.domain import Capacity, EventStatus, Money
from events.domain.codec import dumps_events, loads_events
from events.domain.errors import CorruptSnapshotError
from events.stores import EventStore, InMemoryStorage


class TestInitialization:
    """Tests for seeding and restoring the collection."""

    def test_empty_slot_is_seeded_and_persisted(self, storage, seed_events):
        """With nothing persisted, get_all returns the seed and the slot holds it."""
        store = EventStore(storage, seed=lambda: list(seed_events))

        assert store.get_all() == seed_events
        assert loads_events(storage.items["events"]) == seed_events

    def test_existing_slot_wins_over_seed(self, seed_events):
        storage = InMemoryStorage({"events": dumps_events(seed_events[:1])})
        seed_calls = []

        store = EventStore(storage, seed=lambda: seed_calls.append(1) or seed_events)

        assert store.get_all() == seed_events[:1]
        assert seed_calls == []

    def test_custom_slot_key(self, storage, seed_events):
        EventStore(storage, seed=lambda: seed_events, key="storefront-events")
        assert set(storage.items) == {"storefront-events"}

    def test_malformed_slot_raises_at_construction(self, seed_events):
        """A corrupt snapshot is not recovered from."""
        storage = InMemoryStorage({"events": "[{broken"})
        with pytest.raises(CorruptSnapshotError) as excinfo:
            EventStore(storage, seed=lambda: seed_events)
        assert excinfo.value.key == "events"

    def test_wrong_shape_slot_raises_at_construction(self, seed_events):
        storage = InMemoryStorage({"events": '[{"id": "1"}]'})
        with pytest.raises(CorruptSnapshotError):
            EventStore(storage, seed=lambda: seed_events)


class TestReads:
    def test_get_all_returns_a_copy(self, store):
        """Mutating the returned list does not touch the store."""
        events = store.get_all()
        events.clear()
        assert len(store.get_all()) == 2

    def test_get_by_id(self, store):
        assert store.get_by_id("2").title == "Seed Two"

    def test_get_by_id_not_found(self, store):
        assert store.get_by_id("missing") is None


class TestMutations:
    """Tests for add/update/remove and what they persist."""

    def test_add_stamps_equal_timestamps(self, store):
        store.add(make_new_event(id="9", title="X"))

        event = store.get_by_id("9")
        assert event is not None
        assert event.created_at is not None
        assert event.created_at == event.updated_at

    def test_add_appends_in_storage_order(self, store):
        store.add(make_new_event(id="9"))
        assert [e.id for e in store.get_all()] == ["1", "2", "9"]

    def test_add_does_not_reject_duplicate_ids(self, store):
        store.add(make_new_event(id="1", title="Shadow"))
        assert [e.id for e in store.get_all()] == ["1", "2", "1"]
        assert store.get_by_id("1").title == "Seed One"

    def test_remove_drops_exactly_one(self, store):
        store.add(make_new_event(id="9"))
        before = len(store.get_all())

        store.remove("9")

        assert store.get_by_id("9") is None
        assert len(store.get_all()) == before - 1

    def test_update_merges_fields_and_refreshes_updated_at(self, store):
        original = store.get_by_id("1")

        updated = store.update("1", title="Renamed", price=Money(amount=Decimal("300")))

        assert updated.title == "Renamed"
        assert updated.price == Money(amount=Decimal("300"))
        assert updated.venue == original.venue
        assert updated.created_at == original.created_at
        assert updated.updated_at > original.updated_at
        assert store.get_by_id("1") == updated

    def test_update_ignores_id_and_created_at(self, store):
        original = store.get_by_id("1")
        updated = store.update("1", id="other", created_at=None, title="Kept id")
        assert updated.id == "1"
        assert updated.created_at == original.created_at

    def test_update_unknown_id_keeps_collection_but_persists(self, store, storage):
        """Unknown ids still go through persist and notify."""
        before = store.get_all()
        storage.items.clear()
        seen = []
        store.subscribe(seen.append)

        assert store.update("missing", title="Nope") is None

        assert store.get_all() == before
        assert loads_events(storage.items["events"]) == before
        assert len(seen) == 2

    def test_remove_unknown_id_keeps_collection(self, store):
        before = store.get_all()
        store.remove("missing")
        assert store.get_all() == before

    def test_mutations_survive_reload(self, store, storage, seed_events):
        """A new store over the same slot sees the last persisted snapshot."""
        store.add(make_new_event(id="9", image="poster.png"))
        store.update("1", status=EventStatus.SOLD_OUT)
        store.remove("2")

        reloaded = EventStore(storage, seed=lambda: seed_events)

        assert reloaded.get_all() == store.get_all()


class TestRecordSale:
    def test_record_sale_increments_sold_tickets(self, store):
        updated = store.record_sale("1", 2)
        assert updated.sold_tickets == Capacity(value=5)

    def test_record_sale_does_not_enforce_capacity(self, store):
        updated = store.record_sale("1", 50)
        assert updated.sold_tickets.value > updated.max_tickets.value
        assert updated.status is EventStatus.ACTIVE

    def test_record_sale_unknown_event(self, store):
        assert store.record_sale("missing", 1) is None

    def test_record_sale_rejects_non_positive_quantity(self, store):
        with pytest.raises(ValueError):
            store.record_sale("1", 0)


class GatedClock(TickingClock):
    """Clock whose first reading waits until the test opens the gate."""

    def __init__(self) -> None:
        super().__init__()
        self.entered = threading.Event()
        self.gate = threading.Event()
        self._first = True

    def __call__(self) -> datetime:
        if self._first:
            self._first = False
            self.entered.set()
            self.gate.wait(timeout=5)
        return super().__call__()


class TestConcurrentMutations:
    """Writers in different threads must not drop each other's changes."""

    def test_add_waits_for_inflight_update(self, storage, seed_events):
        clock = GatedClock()
        store = EventStore(storage, seed=lambda: list(seed_events), clock=clock)

        updater = threading.Thread(target=store.update, args=("1",), kwargs={"title": "Renamed"})
        adder = threading.Thread(target=store.add, args=(make_new_event(id="9"),))
        updater.start()
        assert clock.entered.wait(timeout=5)
        adder.start()
        adder.join(timeout=0.2)
        assert adder.is_alive()

        clock.gate.set()
        updater.join(timeout=5)
        adder.join(timeout=5)

        assert [e.id for e in store.get_all()] == ["1", "2", "9"]
        assert store.get_by_id("1").title == "Renamed"
        assert [e.id for e in loads_events(storage.items["events"])] == ["1", "2", "9"]

    def test_concurrent_sales_are_all_counted(self, store):
        threads = [threading.Thread(target=store.record_sale, args=("1", 1)) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert store.get_by_id("1").sold_tickets == Capacity(value=23)


class TestSubscribe:
    """Tests for change notification."""

    def test_subscribe_replays_current_snapshot(self, store, seed_events):
        seen = []
        store.subscribe(seen.append)
        assert seen == [seed_events]

    def test_one_notification_per_mutation(self, store):
        seen = []
        store.subscribe(seen.append)

        store.add(make_new_event(id="9"))
        store.update("9", title="Y")
        store.remove("9")

        assert len(seen) == 4
        assert [e.id for e in seen[1]] == ["1", "2", "9"]
        assert seen[2][-1].title == "Y"
        assert [e.id for e in seen[3]] == ["1", "2"]

    def test_every_subscriber_is_notified(self, store):
        first, second = [], []
        store.subscribe(first.append)
        store.subscribe(second.append)

        store.remove("1")

        assert len(first) == len(second) == 2

    def test_unsubscribe_stops_notifications(self, store):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()

        store.remove("1")

        assert len(seen) == 1

    def test_unsubscribe_twice_is_harmless(self, store):
        unsubscribe = store.subscribe(lambda events: None)
        unsubscribe()
        unsubscribe()

    def test_subscribers_are_scoped_to_their_store(self, store, seed_events):
        other = EventStore(InMemoryStorage(), seed=lambda: list(seed_events))
        seen = []
        store.subscribe(seen.append)

        other.remove("1")

        assert len(seen) == 1


class TestAnalytics:
    """Derived aggregates over the seed: 3 x 250 and 4 x 99.50."""

    def test_total_sales(self, store):
        assert store.total_sales() == Decimal("1148.00")

    def test_total_tickets_sold(self, store):
        assert store.total_tickets_sold() == 7

    def test_total_capacity_and_occupancy(self, store):
        assert store.total_capacity() == 50
        assert store.occupancy_rate() == pytest.approx(14.0)

    def test_occupancy_of_empty_store_is_zero(self):
        store = EventStore(InMemoryStorage(), seed=lambda: [])
        assert store.occupancy_rate() == 0.0
        assert store.total_sales() == 0

    def test_active_count(self, store):
        assert store.active_count() == 1

    def test_aggregates_follow_mutations(self, store):
        store.remove("2")
        assert store.total_tickets_sold() == 3
