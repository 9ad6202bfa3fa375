"""JSON layout of the persisted event collection.

The slot holds a single JSON array of camelCase event records, the same
shape the static seed file uses. There is no schema version.
"""

import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from events.domain.models import Event
from events.domain.value_objects import Capacity, EventStatus, Money


def _number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def format_timestamp(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    # Seed files carry bare dates; those read as midnight UTC.
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def event_to_dict(event: Event) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "date": event.date,
        "time": event.time,
        "venue": event.venue,
        "price": _number(event.price.amount),
        "maxTickets": event.max_tickets.value,
        "soldTickets": event.sold_tickets.value,
        "category": event.category,
        "status": event.status.value,
        "createdAt": format_timestamp(event.created_at),
        "updatedAt": format_timestamp(event.updated_at),
    }
    if event.image is not None:
        data["image"] = event.image
    return data


def event_from_dict(data: dict[str, Any]) -> Event:
    return Event(
        id=str(data["id"]),
        title=data["title"],
        description=data.get("description", ""),
        date=data["date"],
        time=data["time"],
        venue=data.get("venue", ""),
        price=Money(amount=Decimal(str(data["price"]))),
        max_tickets=Capacity(value=int(data["maxTickets"])),
        sold_tickets=Capacity(value=int(data.get("soldTickets", 0))),
        category=data.get("category", ""),
        status=EventStatus(data.get("status", EventStatus.ACTIVE.value)),
        created_at=parse_timestamp(data["createdAt"]),
        updated_at=parse_timestamp(data["updatedAt"]),
        image=data.get("image"),
    )


def dumps_events(events: list[Event]) -> str:
    return json.dumps([event_to_dict(event) for event in events])


def loads_events(raw: str) -> list[Event]:
    """Decode a serialized collection.

    Raises:
        ValueError: If ``raw`` is not valid JSON (``json.JSONDecodeError``).
        KeyError, TypeError: If a record is missing fields or has the wrong shape.
    """
    return [event_from_dict(item) for item in json.loads(raw, parse_float=Decimal)]
