"""Pytest configuration and shared fixtures."""

import dataclasses
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from events.domain import Capacity, Event, EventStatus, Money, NewEvent
from events.stores import EventStore, InMemoryStorage, get_event_store

SEED_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_new_event(**overrides) -> NewEvent:
    fields = {
        "id": "9",
        "title": "X",
        "description": "An evening of something",
        "date": "2024-06-01",
        "time": "19:00",
        "venue": "Hall A",
        "price": Money(amount=Decimal("250")),
        "max_tickets": Capacity(value=10),
        "sold_tickets": Capacity(value=0),
        "category": "Music",
        "status": EventStatus.ACTIVE,
    }
    fields.update(overrides)
    return NewEvent(**fields)


def make_event(**overrides) -> Event:
    created = overrides.pop("created_at", SEED_TIME)
    new_event = make_new_event(**overrides)
    fields = {f.name: getattr(new_event, f.name) for f in dataclasses.fields(new_event)}
    return Event(**fields, created_at=created, updated_at=created)


class TickingClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def admin_client(api_client: APIClient) -> APIClient:
    resp = api_client.post(
        "/api/admin/login", {"username": "admin", "password": "admin123"}
    )
    assert resp.status_code == 200
    return api_client


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    get_event_store.cache_clear()
    yield
    cache.clear()
    get_event_store.cache_clear()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def seed_events():
    return [
        make_event(id="1", title="Seed One", sold_tickets=Capacity(value=3)),
        make_event(
            id="2",
            title="Seed Two",
            price=Money(amount=Decimal("99.50")),
            max_tickets=Capacity(value=40),
            sold_tickets=Capacity(value=4),
            status=EventStatus.INACTIVE,
            image="https://example.com/two.png",
        ),
    ]


@pytest.fixture
def store(storage, seed_events, clock) -> EventStore:
    return EventStore(storage, seed=lambda: list(seed_events), clock=clock)
