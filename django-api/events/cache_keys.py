"""Cache keys for serialized event responses."""

EVENT_LIST_KEY = "events:list"
CACHE_TIMEOUT = 60 * 5


def event_detail_key(event_id: str) -> str:
    return f"events:{event_id}"
