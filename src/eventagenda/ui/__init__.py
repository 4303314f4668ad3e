"""Text output for EventAgenda."""

from eventagenda.ui.display import format_countdown, format_event, render_lines
from eventagenda.ui.error_messages import get_user_friendly_error

__all__ = [
    "format_countdown",
    "format_event",
    "render_lines",
    "get_user_friendly_error",
]
