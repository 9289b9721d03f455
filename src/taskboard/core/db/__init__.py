"""Database utilities - engine, session, table bootstrap."""

from src.taskboard.core.db.engine import dispose_engine, get_engine, wait_for_database
from src.taskboard.core.db.schema import create_tables, drop_tables
from src.taskboard.core.db.session import get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    "wait_for_database",
    # Session
    "get_session",
    # Schema
    "create_tables",
    "drop_tables",
]
