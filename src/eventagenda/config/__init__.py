"""Configuration module for EventAgenda."""

from eventagenda.config.settings import AgendaConfig, get_env_file_path, get_user_config_dir, load_config
from eventagenda.config.constants import (
    ENV_EVENT_DIRS,
    ENV_TIMEZONE,
    ENV_LOG_LEVEL,
    ENV_COUNTDOWN_WIDTH,
    WEEKDAY_CODES,
)

__all__ = [
    "AgendaConfig",
    "get_env_file_path",
    "get_user_config_dir",
    "load_config",
    "ENV_EVENT_DIRS",
    "ENV_TIMEZONE",
    "ENV_LOG_LEVEL",
    "ENV_COUNTDOWN_WIDTH",
    "WEEKDAY_CODES",
]
