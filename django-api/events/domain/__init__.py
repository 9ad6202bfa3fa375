from events.domain.models import Event, NewEvent
from events.domain.value_objects import Capacity, EventStatus, Money

__all__ = [
    "Event",
    "NewEvent",
    "EventStatus",
    "Money",
    "Capacity",
]
