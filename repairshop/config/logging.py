"""
Logging configuration for the application.

Log lines emitted while a request is being served carry the request id and
the acting user, bound once by the request middleware through structlog's
context variables.
"""

import logging
import sys
from typing import Optional

import structlog

from repairshop.config.settings import settings


def configure_logging() -> None:
    """Configure structured logging."""

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.ENVIRONMENT == "production"
        else structlog.dev.ConsoleRenderer(colors=settings.DEBUG)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL),
    )

    # Quiet the drivers; SQL echo is controlled by DATABASE_ECHO
    for noisy in ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def bind_request_context(request_id: str, user_id: Optional[str] = None) -> None:
    """Attach request identity to every log line until the request ends."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, actor_id=user_id)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name)
