"""Custom exceptions for EventAgenda."""

from eventagenda.exceptions.errors import (
    AgendaError,
    HeaderParseError,
    EventBuildError,
    MissingFieldError,
    FieldShapeError,
    FieldValueError,
    DocumentError,
    DocumentReadError,
    ConfigurationError,
    TimezoneResolutionError,
)

__all__ = [
    "AgendaError",
    "HeaderParseError",
    "EventBuildError",
    "MissingFieldError",
    "FieldShapeError",
    "FieldValueError",
    "DocumentError",
    "DocumentReadError",
    "ConfigurationError",
    "TimezoneResolutionError",
]
