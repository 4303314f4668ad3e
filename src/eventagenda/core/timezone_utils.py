"""Local civil time resolution.

Event times are never converted between zones. The configured zone only
decides which wall clock "now" is read from.
"""

import logging
from datetime import datetime, tzinfo
from typing import Optional

import pytz
import tzlocal
from dateutil import tz as du_tz

from eventagenda.config.constants import ABBR_TO_TZ, DEFAULT_TIMEZONE
from eventagenda.exceptions.errors import TimezoneResolutionError

logger = logging.getLogger(__name__)


def resolve_timezone(tz_str: Optional[str]) -> tzinfo:
    """Resolve a timezone setting to a tzinfo.

    Args:
        tz_str: ``"local"``, a common abbreviation such as ``"EST"``, or an
            IANA name such as ``"Europe/London"``.

    Returns:
        The timezone object.

    Raises:
        TimezoneResolutionError: If the name cannot be resolved.
    """
    tz_str_raw = (tz_str or DEFAULT_TIMEZONE).strip()
    tz_upper = tz_str_raw.upper()

    if tz_upper == DEFAULT_TIMEZONE.upper():
        # User's system zone
        return tzlocal.get_localzone()

    tz_name = ABBR_TO_TZ.get(tz_upper, tz_str_raw)
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        # dateutil also understands POSIX TZ strings such as "EST5EDT"
        fallback = du_tz.gettz(tz_name)
        if fallback is None:
            raise TimezoneResolutionError(tz_str_raw)
        logger.debug("Resolved timezone '%s' through dateutil", tz_name)
        return fallback


def current_civil_time(tz_str: Optional[str] = None) -> datetime:
    """Read the wall clock once, as a naive datetime in the configured zone."""
    now = datetime.now(resolve_timezone(tz_str))
    return now.replace(tzinfo=None)


def to_civil_time(moment: datetime, tz_str: Optional[str] = None) -> datetime:
    """Express a given instant as naive civil time.

    Naive values are taken as already civil. Aware values are shifted into
    the configured zone first.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(resolve_timezone(tz_str)).replace(tzinfo=None)
