"""Core parsing and agenda logic for EventAgenda."""

from eventagenda.core.agenda import build_agenda, load_events, parse_document
from eventagenda.core.event_builder import EVENT_RULES, build_event
from eventagenda.core.event_model import AllDayEvent, Event, OnceEvent, RecurringEvent
from eventagenda.core.header_parser import FieldMapping, ListValue, ScalarValue, parse_header
from eventagenda.core.ordering import display_key, select_active, sort_events
from eventagenda.core.temporal_filter import is_active
from eventagenda.core.timezone_utils import current_civil_time, resolve_timezone

__all__ = [
    "build_agenda",
    "load_events",
    "parse_document",
    "EVENT_RULES",
    "build_event",
    "AllDayEvent",
    "Event",
    "OnceEvent",
    "RecurringEvent",
    "FieldMapping",
    "ListValue",
    "ScalarValue",
    "parse_header",
    "display_key",
    "select_active",
    "sort_events",
    "is_active",
    "current_civil_time",
    "resolve_timezone",
]
