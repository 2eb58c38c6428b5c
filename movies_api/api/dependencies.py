"""
FastAPI dependency injection for database sessions.
"""

from typing import Generator
from sqlalchemy.orm import Session

from movies_api.database.connection import DatabaseManager, get_db_manager
from movies_api.api.config import get_database_path


def get_database_manager() -> DatabaseManager:
    """Get the process-wide DatabaseManager for the configured path."""
    return get_db_manager(db_path=get_database_path())


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    with get_database_manager().session_scope() as session:
        yield session
