"""Centralized constants for EventAgenda.

Field names, discriminator values and display formats used by the
header parser, the event builder and the formatter.
"""

from dateutil.relativedelta import MO, TU, WE, TH, FR, SA, SU

# Header block delimiter (a line containing exactly this text)
HEADER_DELIMITER = "---"

# Header field names
FIELD_ALL_DAY = "allDay"
FIELD_TITLE = "title"
FIELD_DATE = "date"
FIELD_END_DATE = "endDate"
FIELD_TYPE = "type"
FIELD_START_TIME = "startTime"
FIELD_END_TIME = "endTime"
FIELD_START_RECUR = "startRecur"
FIELD_END_RECUR = "endRecur"
FIELD_DAYS_OF_WEEK = "daysOfWeek"

# The only field allowed to hold a list
LIST_FIELDS = frozenset({FIELD_DAYS_OF_WEEK})

# Discriminator values (exact string comparison)
ALL_DAY_TRUE = "true"
TYPE_SINGLE = "single"

# Literal scalar meaning "no end" for endRecur
OPEN_ENDED_MARKER = '""'

# Weekday codes for daysOfWeek (R = Thursday, U = Sunday)
WEEKDAY_CODES = {
    "M": MO,
    "T": TU,
    "W": WE,
    "R": TH,
    "F": FR,
    "S": SA,
    "U": SU,
}

# Display formats
TIME_DISPLAY_FORMAT = "%H:%M"
DATE_DISPLAY_FORMAT = "%b %d"
DEFAULT_COUNTDOWN_WIDTH = 10
COUNTDOWN_NOW = "(Now)"
TODAY_LABEL = "Today"

# Settings: environment variable names
ENV_EVENT_DIRS = "EVENTAGENDA_DIRS"
ENV_TIMEZONE = "EVENTAGENDA_TIMEZONE"
ENV_LOG_LEVEL = "EVENTAGENDA_LOG_LEVEL"
ENV_COUNTDOWN_WIDTH = "EVENTAGENDA_COUNTDOWN_WIDTH"

# Per-user config directory name
APP_DIR_NAME = "EventAgenda"

DEFAULT_TIMEZONE = "local"
DEFAULT_LOG_LEVEL = "WARNING"

# Operator-facing error prefix
ERROR_PREFIX = "Error processing event files"

# Timezone abbreviation to IANA zone mapping for the clock setting
ABBR_TO_TZ = {
    # North America
    "EST": "America/New_York",
    "EDT": "America/New_York",
    "CST": "America/Chicago",
    "CDT": "America/Chicago",
    "MST": "America/Denver",
    "MDT": "America/Denver",
    "PST": "America/Los_Angeles",
    "PDT": "America/Los_Angeles",
    # United Kingdom / Europe
    "GMT": "Europe/London",
    "BST": "Europe/London",
    "CET": "Europe/Paris",
    "CEST": "Europe/Paris",
    # Australia
    "AEST": "Australia/Sydney",
    "AEDT": "Australia/Sydney",
}
