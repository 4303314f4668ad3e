"""Turn a parsed header into a typed event.

The event shape is chosen by the first matching rule in ``EVENT_RULES``:

1. ``allDay`` is the scalar ``true``              -> AllDayEvent
2. ``type`` is absent or the scalar ``single``    -> OnceEvent
3. anything else                                  -> RecurringEvent
"""

import logging
from datetime import date, time
from typing import Callable, NamedTuple, Optional, Tuple

from dateutil.relativedelta import weekday

from eventagenda.config.constants import (
    ALL_DAY_TRUE,
    FIELD_ALL_DAY,
    FIELD_DATE,
    FIELD_DAYS_OF_WEEK,
    FIELD_END_DATE,
    FIELD_END_RECUR,
    FIELD_END_TIME,
    FIELD_START_RECUR,
    FIELD_START_TIME,
    FIELD_TITLE,
    FIELD_TYPE,
    OPEN_ENDED_MARKER,
    TYPE_SINGLE,
)
from eventagenda.core.event_model import AllDayEvent, Event, OnceEvent, RecurringEvent
from eventagenda.core.header_parser import FieldMapping
from eventagenda.exceptions.errors import FieldValueError
from eventagenda.utils.date_parsing import parse_date, parse_time, parse_weekday_code

logger = logging.getLogger(__name__)


class EventRule(NamedTuple):
    """One discriminator rule: when ``matches`` holds, ``build`` makes the event."""

    name: str
    matches: Callable[[FieldMapping], bool]
    build: Callable[[FieldMapping], Event]


def _date_field(mapping: FieldMapping, name: str) -> date:
    text = mapping.scalar(name)
    try:
        return parse_date(text)
    except ValueError as e:
        raise FieldValueError(name, text, cause=e) from e


def _time_field(mapping: FieldMapping, name: str) -> time:
    text = mapping.scalar(name)
    try:
        return parse_time(text)
    except ValueError as e:
        raise FieldValueError(name, text, cause=e) from e


def _optional_date_field(mapping: FieldMapping, name: str, default: Optional[date]) -> Optional[date]:
    if name not in mapping:
        return default
    return _date_field(mapping, name)


def _weekdays_field(mapping: FieldMapping, name: str) -> Tuple[weekday, ...]:
    codes = mapping.items(name)
    if not codes:
        raise FieldValueError(name, "", reason="at least one weekday is required")
    days = []
    for code in codes:
        try:
            days.append(parse_weekday_code(code))
        except KeyError as e:
            raise FieldValueError(name, code, reason=f"Unknown weekday '{code}'") from e
    return tuple(days)


def _warn_if_inverted(title: str, begin: time, end: time) -> None:
    # Accepted as written; only flagged to the operator
    if end < begin:
        logger.warning("Event '%s' ends (%s) before it begins (%s)", title, end, begin)


def _is_all_day(mapping: FieldMapping) -> bool:
    return mapping.has_scalar(FIELD_ALL_DAY, ALL_DAY_TRUE)


def _is_single(mapping: FieldMapping) -> bool:
    return FIELD_TYPE not in mapping or mapping.has_scalar(FIELD_TYPE, TYPE_SINGLE)


def _always(mapping: FieldMapping) -> bool:
    return True


def build_all_day(mapping: FieldMapping) -> AllDayEvent:
    """Build an all-day event; ``endDate`` defaults to ``date``."""
    title = mapping.scalar(FIELD_TITLE)
    begin_date = _date_field(mapping, FIELD_DATE)
    end_date = _optional_date_field(mapping, FIELD_END_DATE, default=begin_date)
    return AllDayEvent(title=title, begin_date=begin_date, end_date=end_date)


def build_once(mapping: FieldMapping) -> OnceEvent:
    """Build a single-occurrence timed event."""
    title = mapping.scalar(FIELD_TITLE)
    begin = _time_field(mapping, FIELD_START_TIME)
    end = _time_field(mapping, FIELD_END_TIME)
    day = _date_field(mapping, FIELD_DATE)
    _warn_if_inverted(title, begin, end)
    return OnceEvent(title=title, begin=begin, end=end, day=day)


def build_recurring(mapping: FieldMapping) -> RecurringEvent:
    """Build a weekly recurring event.

    ``endRecur`` absent or equal to the literal ``""`` means open-ended.
    """
    title = mapping.scalar(FIELD_TITLE)
    begin = _time_field(mapping, FIELD_START_TIME)
    end = _time_field(mapping, FIELD_END_TIME)
    begin_recur = _date_field(mapping, FIELD_START_RECUR)

    end_recur = None
    if FIELD_END_RECUR in mapping and mapping.scalar(FIELD_END_RECUR) != OPEN_ENDED_MARKER:
        end_recur = _date_field(mapping, FIELD_END_RECUR)

    recur_days = _weekdays_field(mapping, FIELD_DAYS_OF_WEEK)
    _warn_if_inverted(title, begin, end)
    return RecurringEvent(
        title=title,
        begin=begin,
        end=end,
        begin_recur=begin_recur,
        recur_days=recur_days,
        end_recur=end_recur,
    )


# Evaluated in order; the last rule always matches
EVENT_RULES = (
    EventRule("allDay", _is_all_day, build_all_day),
    EventRule("single", _is_single, build_once),
    EventRule("recurring", _always, build_recurring),
)


def build_event(mapping: FieldMapping) -> Event:
    """Build the event described by a header mapping.

    Args:
        mapping: Fields returned by ``parse_header``.

    Returns:
        An AllDayEvent, OnceEvent or RecurringEvent.

    Raises:
        MissingFieldError: If a required field is absent.
        FieldShapeError: If a field has the wrong shape.
        FieldValueError: If a date, time or weekday cannot be parsed.
    """
    for rule in EVENT_RULES:
        if rule.matches(mapping):
            logger.debug("Building %s event from fields %s", rule.name, sorted(mapping.keys()))
            return rule.build(mapping)
    # Unreachable while the last rule always matches
    raise AssertionError("no event rule matched")
