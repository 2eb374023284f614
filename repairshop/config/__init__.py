"""
Configuration package.
"""

from .database import (
    create_engine,
    create_session_factory,
    get_database_url,
    get_db_session,
    get_session_factory,
)
from .logging import configure_logging, get_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    # Database
    "get_database_url",
    "create_engine",
    "create_session_factory",
    "get_session_factory",
    "get_db_session",
    # Logging
    "configure_logging",
    "get_logger",
]
