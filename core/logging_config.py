"""Logging configuration for the web application."""

from __future__ import annotations

import logging
import sys

from flask import Flask

from core.settings import settings

_CONSOLE_HANDLER_ATTR = "_is_console_log_handler"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _create_console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def ensure_console_logging(logger: logging.Logger) -> None:
    """Attach the console handler to *logger* if missing."""

    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            return
    logger.addHandler(_create_console_handler())


def configure_logging(app: Flask) -> None:
    """Configure the application and mail loggers.

    Debug mode forces ``DEBUG``; otherwise ``LOG_LEVEL`` decides (default
    ``INFO``). Module loggers under ``infrastructure`` and ``application``
    share the console handler so transport events end up next to request
    events.
    """

    with app.app_context():
        level_name = "DEBUG" if app.debug else settings.log_level
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    for logger in (app.logger, logging.getLogger("application"), logging.getLogger("infrastructure")):
        if not app.config.get("TESTING"):
            ensure_console_logging(logger)
        logger.setLevel(level)


def log_event(logger: logging.Logger, message: str, event: str, *args, **extra_attrs) -> None:
    """Log *message* at INFO with an ``event`` identifier for categorization.

    Args:
        logger: Logger instance to use.
        message: Info message, ``%`` formatted with *args*.
        event: Event identifier for categorization.
        **extra_attrs: Additional attributes to include in log record.
    """
    extra = {
        "event": event,
        **extra_attrs,
    }

    logger.info(message, *args, extra=extra)
