"""Utility functions for EventAgenda."""

from eventagenda.utils.date_parsing import (
    parse_date,
    parse_time,
    parse_weekday_code,
)

__all__ = [
    "parse_date",
    "parse_time",
    "parse_weekday_code",
]
