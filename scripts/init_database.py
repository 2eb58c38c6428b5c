#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

Creates the schema and loads the fixture movies and ratings.

Usage:
    # Create tables and seed an empty database
    python scripts/init_database.py

    # Drop everything and start again
    python scripts/init_database.py --reset

    # Schema only
    python scripts/init_database.py --no-seed
"""

import logging
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movies_api.api.config import get_database_path
from movies_api.database import init_database, verify_schema, crud
from movies_api.utils.logging_config import configure_script_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the movies database")
    parser.add_argument("--db-path", default=get_database_path(),
                        help="SQLite database file (default: from DATABASE_URL)")
    parser.add_argument("--reset", action="store_true",
                        help="Drop existing tables before creating them")
    parser.add_argument("--no-seed", dest="seed", action="store_false",
                        help="Create tables without loading fixture data")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_script_logging(debug=args.debug)

    db_manager = init_database(db_path=args.db_path, reset=args.reset, seed=args.seed)
    if not verify_schema(db_manager):
        logger.error("Database initialization failed")
        return 1

    with db_manager.session_scope() as session:
        logger.info(
            "Database ready: %d movies, %d ratings",
            crud.get_movie_count(session),
            crud.get_rating_count(session),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
