"""Structured logging configuration using structlog.

Console output is pretty-printed for development and emitted as JSON in
production so that normalization events from the pager can be aggregated.

Usage:
    from src.core.logging import get_logger, configure_logging

    # Once, in the host application
    configure_logging(development=True)

    logger = get_logger(__name__)
    logger.debug("pagination_config_normalized", anomalies=["EMPTY_COUNT"])
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor


def _build_processors(development: bool) -> list[Processor]:
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if development:
        return [*shared_processors, structlog.dev.ConsoleRenderer(colors=True)]

    return [
        *shared_processors,
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structured logging for the host application.

    Args:
        development: If True, use pretty-printed output. If False, use JSON.
                    If None, reads from ENVIRONMENT env var (default: development).
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR).
                  If None, reads from LOG_LEVEL env var (default: INFO).
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"

    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=_build_processors(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True replaces handlers installed by an earlier call
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def bind_contextvars(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log calls.

    Args:
        **kwargs: Key-value pairs to bind, e.g. pager_id="results".
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def logging_context(**kwargs: Any) -> Iterator[None]:
    """Bind context variables for the duration of a block.

    Example:
        with logging_context(pager_id="results"):
            controller.activate(item, on_change)
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
