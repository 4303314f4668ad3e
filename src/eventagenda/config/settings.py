"""Runtime settings for EventAgenda.

Values come from a ``.env`` file in the per-user config directory,
overridden by the process environment.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import dotenv_values

from eventagenda.config.constants import (
    APP_DIR_NAME,
    DEFAULT_COUNTDOWN_WIDTH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEZONE,
    ENV_COUNTDOWN_WIDTH,
    ENV_EVENT_DIRS,
    ENV_LOG_LEVEL,
    ENV_TIMEZONE,
)
from eventagenda.exceptions.errors import ConfigurationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AgendaConfig:
    """Settings for one agenda run."""

    event_dirs: List[str] = field(default_factory=list)
    timezone: str = DEFAULT_TIMEZONE
    log_level: str = DEFAULT_LOG_LEVEL
    countdown_width: int = DEFAULT_COUNTDOWN_WIDTH

    def __post_init__(self):
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"{ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}, got '{self.log_level}'"
            )
        if self.countdown_width < 0:
            raise ConfigurationError(f"{ENV_COUNTDOWN_WIDTH} must not be negative")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def get_user_config_dir() -> Path:
    """Return a per-user config directory that works across platforms."""
    if sys.platform.startswith("win"):
        base_str = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA")
        base = Path(base_str) if base_str else (Path.home() / "AppData" / "Roaming")
        return base / APP_DIR_NAME

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    # Linux and other Unix-like systems
    base_str = os.environ.get("XDG_CONFIG_HOME")
    base = Path(base_str) if base_str else (Path.home() / ".config")
    return base / APP_DIR_NAME


def get_env_file_path() -> Path:
    """Get the managed .env path under the user config directory."""
    return get_user_config_dir() / ".env"


def _split_dirs(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part for part in raw.split(os.pathsep) if part.strip()]


def _parse_width(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_COUNTDOWN_WIDTH
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_COUNTDOWN_WIDTH} must be an integer, got '{raw}'") from e


def load_config(env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> AgendaConfig:
    """Load settings from a .env file and the environment.

    Args:
        env_file: .env path to read (default: the user config .env).
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        The merged settings.

    Raises:
        ConfigurationError: If a value is invalid.
    """
    path = env_file if env_file is not None else get_env_file_path()
    values = {}
    if path.exists():
        # Parse without mutating os.environ
        values.update({k: v for k, v in dotenv_values(path).items() if v is not None})
        logger.debug("Loaded settings from %s", path)

    values.update(os.environ if environ is None else environ)

    return AgendaConfig(
        event_dirs=_split_dirs(values.get(ENV_EVENT_DIRS)),
        timezone=values.get(ENV_TIMEZONE) or DEFAULT_TIMEZONE,
        log_level=values.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL,
        countdown_width=_parse_width(values.get(ENV_COUNTDOWN_WIDTH)),
    )
