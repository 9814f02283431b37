"""Logging configuration (stdlib logging + structlog)."""

import logging
import sys

import structlog

from infrastructure.config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure stdlib logging and structlog.

    Modules log through ``structlog.get_logger(__name__)`` with
    key/value fields; events are rendered for humans ("console") or as
    one JSON object per line ("json").

    Example:
        >>> configure_logging(Settings(log_level="DEBUG", log_format="json"))
        >>> structlog.get_logger("demo").info("user registered", user_id="42")
    """
    level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
