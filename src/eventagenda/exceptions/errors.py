"""Exception hierarchy for EventAgenda."""

from typing import Optional


class AgendaError(Exception):
    """Base class for every error raised by EventAgenda."""


class HeaderParseError(AgendaError):
    """Raised when a document header is structurally malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class EventBuildError(AgendaError):
    """Raised when a header mapping cannot be turned into an event."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class MissingFieldError(EventBuildError):
    """Raised when a required field is absent."""

    def __init__(self, field: str):
        super().__init__(field, f"Has no '{field}'")


class FieldShapeError(EventBuildError):
    """Raised when a field is a list where a scalar was expected, or vice versa."""

    def __init__(self, field: str, expected: str):
        self.expected = expected
        if expected == "scalar":
            message = f"'{field}' is a list"
        else:
            message = f"'{field}' is not a list"
        super().__init__(field, message)


class FieldValueError(EventBuildError):
    """Raised when a field value cannot be interpreted."""

    def __init__(self, field: str, value: str, cause: Optional[Exception] = None, reason: Optional[str] = None):
        self.value = value
        self.cause = cause
        detail = reason or (str(cause) if cause else "invalid value")
        super().__init__(field, f"'{field}' has invalid value {value!r}: {detail}")


class DocumentError(AgendaError):
    """Raised when a single event document fails to parse or build."""

    def __init__(self, path, cause: AgendaError):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class DocumentReadError(AgendaError):
    """Raised when an event directory or document cannot be read."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class ConfigurationError(AgendaError):
    """Raised for invalid settings or command-line values."""


class TimezoneResolutionError(AgendaError):
    """Raised when the configured civil timezone cannot be resolved."""

    def __init__(self, zone: str):
        self.zone = zone
        super().__init__(f"Unknown timezone '{zone}'")
