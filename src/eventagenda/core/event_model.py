"""Event data model.

An event is exactly one of three immutable shapes. Consumers dispatch on the
concrete class and treat anything else as a programming error.
"""

from dataclasses import dataclass
from datetime import date, time
from typing import Optional, Tuple, Union

from dateutil.relativedelta import weekday


@dataclass(frozen=True)
class OnceEvent:
    """A timed event on a single day."""

    title: str
    begin: time
    end: time
    day: date


@dataclass(frozen=True)
class RecurringEvent:
    """A timed event repeating weekly between two dates.

    ``end_recur`` is inclusive; ``None`` means the recurrence never ends.
    """

    title: str
    begin: time
    end: time
    begin_recur: date
    recur_days: Tuple[weekday, ...]
    end_recur: Optional[date] = None

    def occurs_on(self, day: date) -> bool:
        """True if ``day`` falls on one of the recurrence weekdays."""
        return any(recur_day.weekday == day.weekday() for recur_day in self.recur_days)


@dataclass(frozen=True)
class AllDayEvent:
    """An event covering whole days, ``begin_date`` inclusive to ``end_date`` exclusive."""

    title: str
    begin_date: date
    end_date: date


Event = Union[OnceEvent, RecurringEvent, AllDayEvent]

TIMED_EVENT_TYPES = (OnceEvent, RecurringEvent)


def unknown_event(event: object) -> TypeError:
    """Error for a value that is not one of the event shapes."""
    return TypeError(f"Expected an event, got {type(event).__name__}")
