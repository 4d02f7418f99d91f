"""Shared utilities."""

from .logger import configure_structlog, get_logger

__all__ = ["configure_structlog", "get_logger"]
