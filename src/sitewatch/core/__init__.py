"""Core modules for database access and dependencies."""

from sitewatch.core.database import Base, close_db, get_session, get_session_context, init_db

__all__ = [
    "Base",
    "init_db",
    "close_db",
    "get_session",
    "get_session_context",
]
