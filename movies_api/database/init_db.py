"""
Database initialization and schema creation.

This module provides functions to initialize the database schema and
populate it with the fixture catalog.
"""

import logging

from sqlalchemy import inspect

from movies_api.database.connection import DatabaseManager, get_db_manager

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'movies', 'user_ratings'}


def init_database(
    db_path: str = "data/movies.db",
    reset: bool = False,
    seed: bool = True,
    db_manager: DatabaseManager | None = None,
) -> DatabaseManager:
    """
    Initialize the database, create all tables and optionally seed it.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones
        seed: If True, insert fixture data when the store is empty
        db_manager: Use this manager instead of the global one

    Returns:
        DatabaseManager instance
    """
    if db_manager is None:
        db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.info("Resetting database (dropping all tables)")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.database_url)

    if seed and db_manager.seed(only_if_empty=True):
        logger.info("Fixture data loaded")

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error(f"Missing tables: {missing_tables}")
        return False

    logger.debug(f"All tables exist: {existing_tables}")
    return True
