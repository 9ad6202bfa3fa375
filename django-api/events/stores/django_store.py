"""Django cache implementation of KeyValueStorage."""

from django.core.cache import BaseCache

from events.stores.interfaces import KeyValueStorage


class CacheStorage(KeyValueStorage):
    """Slot storage backed by a Django cache alias, with no expiry."""

    def __init__(self, cache: BaseCache) -> None:
        self._cache = cache

    def get_item(self, key: str) -> str | None:
        return self._cache.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._cache.set(key, value, timeout=None)

    def remove_item(self, key: str) -> None:
        self._cache.delete(key)
