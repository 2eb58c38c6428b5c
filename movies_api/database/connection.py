"""
Database connection management using SQLAlchemy.

This module handles SQLite database connection creation, session management,
and the explicit seeding step for the movie catalog.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movies_api.database.models import Base
from movies_api.database import crud
from movies_api.database.seed import seed_database

logger = logging.getLogger(__name__)


# Default database path
DEFAULT_DB_PATH = "data/movies.db"

# Path value selecting a private in-memory database
MEMORY_DB_PATH = ":memory:"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL.

    Args:
        db_path: Path to SQLite database file, or ":memory:"

    Returns:
        SQLAlchemy database URL
    """
    if db_path == MEMORY_DB_PATH:
        return "sqlite://"

    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    # SQLite URL format: sqlite:///path/to/database.db
    return f"sqlite:///{os.path.abspath(db_path)}"


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable foreign key constraints for SQLite.

    SQLite disables foreign key constraints by default.
    This event listener enables them for all connections.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, table creation and seeding.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Initialize database manager.

        Args:
            db_path: Path to SQLite database file, or ":memory:"
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)

        # StaticPool keeps a single connection, so an in-memory database
        # survives across sessions
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def create_tables(self):
        """Create all tables defined in the models if they don't exist."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """
        Drop and recreate all tables.

        WARNING: This will delete all data in the database!
        """
        self.drop_tables()
        self.create_tables()

    def seed(self, only_if_empty: bool = False) -> bool:
        """
        Insert the fixture movies and ratings.

        Args:
            only_if_empty: Skip seeding unless the movies or ratings table is empty

        Returns:
            True if fixture data was inserted
        """
        with self.session_scope() as session:
            if only_if_empty and crud.get_movie_count(session) and crud.get_rating_count(session):
                logger.debug("Database already populated, skipping seed")
                return False
            seed_database(session)
        return True

    def get_session(self) -> Session:
        """
        Get a new database session.

        Returns:
            SQLAlchemy Session object. The caller is responsible for closing it.
        """
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                crud.get_movie(session, 1)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


# Global database manager instance (singleton pattern)
_db_manager: Optional[DatabaseManager] = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Get or create the global database manager instance.

    Args:
        db_path: Path to SQLite database file
        echo: If True, log all SQL statements

    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
    return _db_manager
