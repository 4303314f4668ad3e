"""Display order for agenda events."""

from datetime import datetime
from typing import Iterable, List, Tuple

from eventagenda.core.event_model import (
    TIMED_EVENT_TYPES,
    AllDayEvent,
    Event,
    unknown_event,
)
from eventagenda.core.temporal_filter import is_active


def display_key(event: Event) -> Tuple:
    """Sort key: all-day events first, then timed events by begin time."""
    if isinstance(event, AllDayEvent):
        return (0,)
    if isinstance(event, TIMED_EVENT_TYPES):
        return (1, event.begin)
    raise unknown_event(event)


def sort_events(events: Iterable[Event]) -> List[Event]:
    """Sort events for display. Ties keep their input order."""
    return sorted(events, key=display_key)


def select_active(events: Iterable[Event], now: datetime) -> List[Event]:
    """Keep the events active at ``now`` and sort them for display."""
    return sort_events(event for event in events if is_active(event, now))
