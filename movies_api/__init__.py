"""
Movies API application package.

This package contains the movie catalog and user rating service, including
the query engine, rating upsert logic, database operations, and utilities.
"""

__version__ = "1.0.0"
