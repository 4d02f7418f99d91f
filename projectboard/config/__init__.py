"""Configuration module for projectboard."""

from .constants import DRAG_MEDIA_TYPE, INVALID_INPUT_MESSAGE
from .settings import Settings, load_env_file
from .validation import ConfigValidationError

__all__ = [
    "DRAG_MEDIA_TYPE",
    "INVALID_INPUT_MESSAGE",
    "ConfigValidationError",
    "Settings",
    "load_env_file",
]
