"""
Database module for the movies service.

This module provides database models, connection management, seeding and
CRUD operations for the SQLite database using SQLAlchemy ORM.
"""

from movies_api.database.models import Base, Movie, UserRating
from movies_api.database.connection import DatabaseManager, get_db_manager
from movies_api.database.init_db import init_database, verify_schema
from movies_api.database.seed import seed_database
from movies_api.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    'UserRating',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    'seed_database',
    # CRUD module
    'crud',
]
