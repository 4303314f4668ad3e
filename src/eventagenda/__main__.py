"""Entry point for running eventagenda as a module.

Usage: python -m eventagenda [DIR ...] [--at ISO_DATETIME] [--verbose]
"""

import argparse
import logging
import sys
from typing import List, Optional

from dateutil.parser import isoparse

from eventagenda import __version__
from eventagenda.config.constants import ENV_EVENT_DIRS, ERROR_PREFIX
from eventagenda.config.settings import load_config
from eventagenda.core.agenda import build_agenda
from eventagenda.core.timezone_utils import current_civil_time, to_civil_time
from eventagenda.exceptions.errors import AgendaError, ConfigurationError
from eventagenda.ui.display import render_lines
from eventagenda.ui.error_messages import get_user_friendly_error

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="eventagenda",
        description="Show the events from directories of event documents that are active today.",
    )
    p.add_argument("directories", nargs="*", help=f"Event directories (default: ${ENV_EVENT_DIRS})")
    p.add_argument("--at", default=None, help="Evaluate at this ISO-8601 local time instead of now")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = _parse_args(argv)

    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"{ERROR_PREFIX}: {get_user_friendly_error(e)}", file=sys.stderr)
        return 1

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    directories = args.directories or config.event_dirs
    if not directories:
        print(f"eventagenda: no event directories given and ${ENV_EVENT_DIRS} is not set", file=sys.stderr)
        return 2

    try:
        # Captured once; shared by filtering and display
        if args.at:
            try:
                now = to_civil_time(isoparse(args.at), config.timezone)
            except ValueError as e:
                raise ConfigurationError(f"--at: {e}") from e
        else:
            now = current_civil_time(config.timezone)

        events = build_agenda(directories, now)
        lines = render_lines(events, now, config.countdown_width)
    except AgendaError as e:
        logger.debug("Agenda run failed", exc_info=True)
        print(f"{ERROR_PREFIX}: {get_user_friendly_error(e)}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
