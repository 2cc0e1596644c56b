"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env_flag
from .errors import ConfigurationError
from .logging import configure_logging
from .profile import EXTENDED_PROPERTIES_ENV, ProfileConfig, get_profile_config

__all__ = [
    "EXTENDED_PROPERTIES_ENV",
    "ConfigurationError",
    "ProfileConfig",
    "configure_logging",
    "get_profile_config",
    "read_env_flag",
]
