"""Configuration settings for projectboard.

This module provides a Settings class with property-based access to
configuration values. Values are resolved from explicit overrides first,
then environment variables, then the hard-coded defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from projectboard.config.constants import (
    DEFAULT_DESCRIPTION_MIN_LENGTH,
    DEFAULT_MAX_PEOPLE,
    DEFAULT_MIN_PEOPLE,
)
from projectboard.utils.logger import get_logger

logger = get_logger("config.settings")


def load_env_file(path: Path) -> bool:
    """Load a .env file into the environment without overriding existing vars.

    Returns True when the file existed and was loaded.
    """
    if not path.exists():
        logger.debug("No .env file found", path=str(path))
        return False
    load_dotenv(dotenv_path=path, override=False)
    logger.debug("Loaded .env file", path=str(path))
    return True


class Settings:
    """Application settings.

    Overrides win over environment variables, which win over defaults.
    Environment values are converted to the type of the default.
    """

    def __init__(self, overrides: Mapping[str, Any] | None = None):
        self._overrides: dict[str, Any] = dict(overrides or {})

    # Validation helper
    def validate_or_raise(self) -> None:
        from projectboard.config.validation import validate_or_raise as _v

        _v(self.description_min_length, self.min_people, self.max_people)

    def validation_status(self) -> tuple[bool, list[str]]:
        """Return (is_valid, errors) without raising."""
        from projectboard.config.validation import ConfigValidationError

        try:
            self.validate_or_raise()
            return True, []
        except ConfigValidationError as exc:
            return False, list(exc.errors)

    def _get(self, key: str, default: Any, env_key: str | None = None) -> Any:
        """Get config value from overrides, fallback to env, then default."""
        if key in self._overrides:
            return self._overrides[key]
        if env_key and (env_val := os.getenv(env_key)):
            try:
                if isinstance(default, bool):
                    return env_val.lower() in ("true", "1", "yes", "on")
                elif isinstance(default, int):
                    return int(env_val)
                elif isinstance(default, float):
                    return float(env_val)
            except ValueError:
                logger.warning(
                    "Config type mismatch, using default",
                    key=env_key,
                    expected=type(default).__name__,
                    value=env_val,
                )
                return default
            return env_val
        return default

    # Project form bounds
    @property
    def description_min_length(self) -> int:
        return self._get(
            "description_min_length",
            DEFAULT_DESCRIPTION_MIN_LENGTH,
            "PROJECTBOARD_DESCRIPTION_MIN_LENGTH",
        )

    @property
    def min_people(self) -> int:
        return self._get("min_people", DEFAULT_MIN_PEOPLE, "PROJECTBOARD_MIN_PEOPLE")

    @property
    def max_people(self) -> int:
        return self._get("max_people", DEFAULT_MAX_PEOPLE, "PROJECTBOARD_MAX_PEOPLE")

    # Logging Configuration
    @property
    def log_level(self) -> str:
        return self._get("log_level", "INFO", "LOG_LEVEL")

    @property
    def log_format(self) -> str:
        return self._get("log_format", "pretty", "LOG_FORMAT")

    @property
    def log_colors(self) -> bool:
        return self._get("log_colors", True, "LOG_COLORS")
