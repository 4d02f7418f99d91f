"""Structured logging for projectboard using structlog.

Importing this module changes no global logging state. Module loggers run
the processor chain below and hand their records to the stdlib
``projectboard`` logger; an application that wants rendered output calls
``configure_structlog()`` once at startup, which attaches a handler to that
logger only. Embedding apps can instead route ``projectboard`` records
through their own handlers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from projectboard.config.settings import Settings

PACKAGE_LOGGER_NAME = "projectboard"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

# Library default: stay silent unless the application configures output
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def configure_structlog(settings: Settings | None = None) -> logging.Handler:
    """Attach a pretty or JSON renderer to the ``projectboard`` logger.

    Format, colours and level come from ``settings`` (LOG_FORMAT, LOG_COLORS,
    LOG_LEVEL when not overridden). Calling it again replaces the handler
    installed by the previous call. The root logger is left untouched.
    """
    global _handler

    if settings is None:
        from projectboard.config.settings import Settings

        settings = Settings()

    if str(settings.log_format).lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=bool(settings.log_colors))

    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(
        getattr(logging, str(settings.log_level).upper(), logging.INFO)
    )
    package_logger.propagate = False
    _handler = handler
    return handler


def get_logger(name: str, level: int | None = None) -> FilteringBoundLogger:
    """Get a structlog logger under the projectboard namespace."""
    full_name = (
        name
        if name.startswith(PACKAGE_LOGGER_NAME)
        else f"{PACKAGE_LOGGER_NAME}.{name}"
    )
    stdlib_logger = logging.getLogger(full_name)
    if level is not None:
        stdlib_logger.setLevel(level)
    return structlog.wrap_logger(
        stdlib_logger,
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


logger = get_logger(PACKAGE_LOGGER_NAME)
