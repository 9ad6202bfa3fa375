"""Event storage and the process-wide default store."""

from functools import cache
from pathlib import Path

from django.conf import settings
from django.core.cache import caches

from events.domain import Event
from events.domain.codec import loads_events
from events.stores.django_store import CacheStorage
from events.stores.event_store import EventStore
from events.stores.interfaces import KeyValueStorage
from events.stores.memory_store import InMemoryStorage

__all__ = [
    "CacheStorage",
    "EventStore",
    "InMemoryStorage",
    "KeyValueStorage",
    "get_event_store",
    "load_seed_file",
]


def load_seed_file(path: str | Path) -> list[Event]:
    """Read the static seed dataset."""
    return loads_events(Path(path).read_text(encoding="utf-8"))


@cache
def get_event_store() -> EventStore:
    """Return the store shared by every request in this process.

    Built on first call from ``settings.EVENT_STORE``.
    """
    config = settings.EVENT_STORE
    storage = CacheStorage(caches[config["CACHE_ALIAS"]])
    return EventStore(
        storage,
        seed=lambda: load_seed_file(config["SEED_PATH"]),
        key=config["KEY"],
    )
