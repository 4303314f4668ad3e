"""Operator-facing error messages."""

from eventagenda.exceptions.errors import (
    ConfigurationError,
    DocumentError,
    DocumentReadError,
    FieldShapeError,
    HeaderParseError,
    MissingFieldError,
    TimezoneResolutionError,
)


def _describe_cause(error: Exception) -> str:
    if isinstance(error, HeaderParseError):
        return f"malformed header ({error})"
    if isinstance(error, MissingFieldError):
        return f"missing required field '{error.field}'"
    if isinstance(error, FieldShapeError):
        return f"field '{error.field}' should be a {error.expected}"
    # FieldValueError already names the field and the bad value
    return str(error)


def get_user_friendly_error(error: Exception) -> str:
    """Convert an exception to a single diagnostic line.

    Args:
        error: The exception to convert.

    Returns:
        A message naming the failing document and field where known.
    """
    if isinstance(error, DocumentError):
        return f"{error.path}: {_describe_cause(error.cause)}"

    if isinstance(error, DocumentReadError):
        return f"cannot read {error.path}: {error.cause}"

    if isinstance(error, TimezoneResolutionError):
        return f"unknown timezone '{error.zone}'; use 'local' or an IANA name such as 'Europe/London'"

    if isinstance(error, ConfigurationError):
        return f"invalid configuration: {error}"

    return _describe_cause(error)
