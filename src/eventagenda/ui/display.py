"""Render agenda events as text lines."""

from datetime import datetime, time, timedelta
from typing import Iterable, List

from eventagenda.config.constants import (
    COUNTDOWN_NOW,
    DATE_DISPLAY_FORMAT,
    DEFAULT_COUNTDOWN_WIDTH,
    TIME_DISPLAY_FORMAT,
    TODAY_LABEL,
)
from eventagenda.core.event_model import (
    TIMED_EVENT_TYPES,
    AllDayEvent,
    Event,
    unknown_event,
)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_countdown(begin: time, now: datetime) -> str:
    """Relative hint for how long until ``begin``.

    Args:
        begin: The event's start time of day.
        now: The run's captured local time.

    Returns:
        ``(Now)`` once the start has passed, otherwise whole minutes under
        an hour and whole hours beyond that.
    """
    delta = datetime.combine(now.date(), begin) - now
    if delta < timedelta(0):
        return COUNTDOWN_NOW
    seconds = int(delta.total_seconds())
    if seconds < 3600:
        return f"({_plural(seconds // 60, 'minute')})"
    return f"({_plural(seconds // 3600, 'hour')})"


def _time_range(begin: time, end: time) -> str:
    return f"{begin.strftime(TIME_DISPLAY_FORMAT)} - {end.strftime(TIME_DISPLAY_FORMAT)}"


def format_event(event: Event, now: datetime, countdown_width: int = DEFAULT_COUNTDOWN_WIDTH) -> str:
    """Render one event as an agenda line.

    Timed events read ``HH:MM - HH:MM (countdown) | title``. All-day events
    put ``Today`` or an inclusive ``Mon DD - Mon DD`` range in the same
    column so the ``|`` separators line up.
    """
    # "HH:MM - HH:MM " followed by the countdown column
    label_width = len(_time_range(time(), time())) + 1 + countdown_width

    if isinstance(event, TIMED_EVENT_TYPES):
        countdown = format_countdown(event.begin, now)
        return f"{_time_range(event.begin, event.end)} {countdown:<{countdown_width}} | {event.title}"

    if isinstance(event, AllDayEvent):
        if event.end_date - event.begin_date == timedelta(days=1):
            label = TODAY_LABEL
        else:
            last_day = event.end_date - timedelta(days=1)
            label = (
                f"{event.begin_date.strftime(DATE_DISPLAY_FORMAT)} - "
                f"{last_day.strftime(DATE_DISPLAY_FORMAT)}"
            )
        return f"{label:<{label_width}} | {event.title}"

    raise unknown_event(event)


def render_lines(events: Iterable[Event], now: datetime, countdown_width: int = DEFAULT_COUNTDOWN_WIDTH) -> List[str]:
    """Render every event with the same captured ``now``."""
    return [format_event(event, now, countdown_width) for event in events]
