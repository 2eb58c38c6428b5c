"""
Catalog queries against the database.

Loads movies and ratings through the CRUD layer and hands them to the
query engine. Failures are raised as ``InvalidRequestError`` or
``NotFoundError``.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from movies_api.core import queries
from movies_api.core.errors import InvalidRequestError, NotFoundError
from movies_api.core.queries import MovieFilter, MovieReturnItem
from movies_api.database import crud
from movies_api.database.models import Movie

logger = logging.getLogger(__name__)


def find_movies(
    session: Session,
    title: Optional[str] = None,
    year: int = 0,
    genre: Optional[str] = None,
) -> List[Movie]:
    """
    Find movies matching any of the supplied criteria.

    Args:
        session: Database session
        title: Case-sensitive title substring
        year: Exact year of release; 0 means unset
        genre: Case-sensitive genres substring

    Returns:
        Matching Movie objects in ID order

    Raises:
        InvalidRequestError: If no criterion is supplied
        NotFoundError: If nothing matches
    """
    movie_filter = MovieFilter(title=title, year=year or 0, genre=genre)
    if movie_filter.is_empty():
        raise InvalidRequestError("At least one of title, year or genre is required")

    movies = queries.filter_movies(crud.get_movies(session), movie_filter)
    if not movies:
        logger.debug(f"No movies match {movie_filter}")
        raise NotFoundError("No movies match the filter")
    return movies


def top_rated_movies(session: Session, limit: int = queries.TOP_N) -> List[MovieReturnItem]:
    """
    Get the highest rated movies by average rating.

    Raises:
        NotFoundError: If no ratings exist
    """
    items = queries.top_rated(crud.get_movies(session), crud.get_all_ratings(session), limit=limit)
    if not items:
        raise NotFoundError("No rated movies found")
    return items


def top_rated_movies_for_user(
    session: Session,
    user_id: Optional[str],
    limit: int = queries.TOP_N,
) -> List[MovieReturnItem]:
    """
    Get a user's highest rated movies.

    Args:
        session: Database session
        user_id: User identifier
        limit: Maximum number of movies to return

    Raises:
        InvalidRequestError: If user_id is empty or the user has no ratings
    """
    if not user_id:
        raise InvalidRequestError("A user id is required")

    user_ratings = crud.get_ratings_by_user(session, user_id)
    if not user_ratings:
        logger.info(f"User {user_id!r} has no ratings")
        raise InvalidRequestError(f"User {user_id!r} has no ratings")

    return queries.top_rated_for_user(crud.get_movies(session), user_ratings, limit=limit)
