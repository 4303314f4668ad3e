"""Date, time and weekday parsing for event header values."""

import re
from datetime import date, time

from dateutil.parser import isoparser
from dateutil.relativedelta import weekday

from eventagenda.config.constants import WEEKDAY_CODES

# Strict ISO-8601 parser; no fuzzy matching of human text
_ISO_PARSER = isoparser(sep="T")

# Only the extended calendar forms are accepted; reduced-precision and
# basic forms such as "2024", "20240603" or "0915" are rejected
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_PATTERN = re.compile(r"^(\d{2}):\d{2}(?::\d{2})?$")


def parse_date(text: str) -> date:
    """Parse an ISO-8601 calendar date such as ``2024-06-03``.

    Args:
        text: The raw header value.

    Returns:
        The parsed date.

    Raises:
        ValueError: If the text is not a valid calendar date.
    """
    if not isinstance(text, str) or not text:
        raise ValueError("empty date")
    if not DATE_PATTERN.match(text):
        raise ValueError("expected a date as YYYY-MM-DD")
    return _ISO_PARSER.parse_isodate(text)


def parse_time(text: str) -> time:
    """Parse an ISO-8601 time of day such as ``09:15`` or ``09:15:30``.

    Args:
        text: The raw header value.

    Returns:
        The parsed naive time.

    Raises:
        ValueError: If the text is not a valid time of day.
    """
    if not isinstance(text, str) or not text:
        raise ValueError("empty time")
    match = TIME_PATTERN.match(text)
    if not match:
        raise ValueError("expected a time as HH:MM or HH:MM:SS")
    # isoparser reads 24:00 as midnight
    if int(match.group(1)) > 23:
        raise ValueError("hour must be in 0..23")
    return _ISO_PARSER.parse_isotime(text)


def parse_weekday_code(code: str) -> weekday:
    """Map a single-letter weekday code (M T W R F S U) to a weekday.

    Raises:
        KeyError: If the code is not recognised.
    """
    return WEEKDAY_CODES[code]
