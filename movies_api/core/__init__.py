"""
Core catalog logic: query engine, catalog queries and rating upserts.
"""

from movies_api.core.errors import MoviesApiError, InvalidRequestError, NotFoundError
from movies_api.core.queries import MovieFilter, MovieReturnItem

__all__ = [
    'MoviesApiError',
    'InvalidRequestError',
    'NotFoundError',
    'MovieFilter',
    'MovieReturnItem',
]
