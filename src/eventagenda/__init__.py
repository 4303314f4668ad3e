"""
EventAgenda - Today's agenda from a directory of event documents

Reads small text documents with a front-matter header describing one
calendar event each, and lists the events active now or later today.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from eventagenda.exceptions.errors import (
    AgendaError,
    DocumentError,
    EventBuildError,
    HeaderParseError,
)
from eventagenda.core.event_model import AllDayEvent, Event, OnceEvent, RecurringEvent
from eventagenda.core.header_parser import FieldMapping, ListValue, ScalarValue, parse_header
from eventagenda.core.event_builder import build_event
from eventagenda.core.temporal_filter import is_active
from eventagenda.core.ordering import select_active, sort_events
from eventagenda.ui.display import format_event

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "AgendaError",
    "DocumentError",
    "EventBuildError",
    "HeaderParseError",
    # Model
    "AllDayEvent",
    "Event",
    "OnceEvent",
    "RecurringEvent",
    "FieldMapping",
    "ListValue",
    "ScalarValue",
    # Core
    "parse_header",
    "build_event",
    "is_active",
    "select_active",
    "sort_events",
    "format_event",
]
