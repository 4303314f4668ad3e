"""Settings and clock tests for EventAgenda."""

import os
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

import pytz

from eventagenda.config.settings import AgendaConfig, load_config
from eventagenda.core.timezone_utils import current_civil_time, resolve_timezone, to_civil_time
from eventagenda.exceptions.errors import ConfigurationError, TimezoneResolutionError
from eventagenda.ui.error_messages import get_user_friendly_error


class TestLoadConfig(unittest.TestCase):
    """Settings come from a .env file, overridden by the environment."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.env_file = Path(self._tmp.name) / ".env"

    def tearDown(self):
        self._tmp.cleanup()

    def test_defaults_without_env_file(self):
        config = load_config(env_file=self.env_file, environ={})

        self.assertEqual(config, AgendaConfig())
        self.assertEqual(config.timezone, "local")
        self.assertEqual(config.countdown_width, 10)

    def test_reads_env_file(self):
        self.env_file.write_text(
            "EVENTAGENDA_DIRS=/srv/events\n"
            "EVENTAGENDA_TIMEZONE=Europe/London\n"
            "EVENTAGENDA_LOG_LEVEL=debug\n",
            encoding="utf-8",
        )

        config = load_config(env_file=self.env_file, environ={})

        self.assertEqual(config.event_dirs, ["/srv/events"])
        self.assertEqual(config.timezone, "Europe/London")
        self.assertEqual(config.log_level, "DEBUG")

    def test_environment_overrides_env_file(self):
        self.env_file.write_text("EVENTAGENDA_TIMEZONE=Europe/London\n", encoding="utf-8")

        config = load_config(
            env_file=self.env_file,
            environ={
                "EVENTAGENDA_TIMEZONE": "UTC",
                "EVENTAGENDA_DIRS": os.pathsep.join(["/a", "/b"]),
                "EVENTAGENDA_COUNTDOWN_WIDTH": "12",
            },
        )

        self.assertEqual(config.timezone, "UTC")
        self.assertEqual(config.event_dirs, ["/a", "/b"])
        self.assertEqual(config.countdown_width, 12)

    def test_invalid_log_level(self):
        with self.assertRaises(ConfigurationError):
            load_config(env_file=self.env_file, environ={"EVENTAGENDA_LOG_LEVEL": "chatty"})

    def test_invalid_countdown_width(self):
        with self.assertRaises(ConfigurationError):
            load_config(env_file=self.env_file, environ={"EVENTAGENDA_COUNTDOWN_WIDTH": "wide"})


class TestTimezones(unittest.TestCase):
    def test_named_zone(self):
        self.assertEqual(resolve_timezone("UTC"), pytz.utc)

    def test_abbreviation(self):
        self.assertEqual(str(resolve_timezone("est")), "America/New_York")

    def test_unknown_zone(self):
        with self.assertRaises(TimezoneResolutionError) as ctx:
            resolve_timezone("Not/AZone")

        self.assertIn("Not/AZone", get_user_friendly_error(ctx.exception))

    def test_current_civil_time_is_naive(self):
        self.assertIsNone(current_civil_time("UTC").tzinfo)

    def test_to_civil_time_shifts_aware_values(self):
        moment = datetime(2024, 6, 3, 12, 0, tzinfo=pytz.utc)

        self.assertEqual(to_civil_time(moment, "Europe/London"), datetime(2024, 6, 3, 13, 0))

    def test_to_civil_time_keeps_naive_values(self):
        moment = datetime(2024, 6, 3, 12, 0)

        self.assertEqual(to_civil_time(moment, "Europe/London"), moment)


if __name__ == "__main__":
    unittest.main()
