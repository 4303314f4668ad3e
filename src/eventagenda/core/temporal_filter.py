"""Decide whether an event belongs on the agenda at a given instant."""

from datetime import datetime

from eventagenda.core.event_model import (
    AllDayEvent,
    Event,
    OnceEvent,
    RecurringEvent,
    unknown_event,
)


def is_active(event: Event, now: datetime) -> bool:
    """Return True if ``event`` should be shown at local civil time ``now``.

    Timed events stay visible until their end time passes, so an event that
    is already in progress is still active. All-day events cover the
    half-open range ``[begin_date, end_date)``.

    Args:
        event: The event to test.
        now: The run's captured local time (naive).

    Returns:
        Whether the event is on today's agenda right now.
    """
    today = now.date()
    current_time = now.time()

    if isinstance(event, OnceEvent):
        return event.day == today and event.end >= current_time

    if isinstance(event, RecurringEvent):
        return (
            event.occurs_on(today)
            and today >= event.begin_recur
            and (event.end_recur is None or today <= event.end_recur)
            and event.end >= current_time
        )

    if isinstance(event, AllDayEvent):
        return event.begin_date <= today < event.end_date

    raise unknown_event(event)
