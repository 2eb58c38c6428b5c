"""
Rating upsert logic.
"""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from movies_api.core.errors import InvalidRequestError, NotFoundError
from movies_api.database import crud

logger = logging.getLogger(__name__)


def upsert_user_rating(
    session: Session,
    user_id: Optional[str],
    movie_id: int,
    rating: int,
) -> None:
    """
    Add a rating, or overwrite the user's existing rating for the movie.

    Checks run in this order: the user must already have at least one
    rating, the movie must exist, and the rating must be between 1 and 5.
    Users without any rating can therefore never add one; that matches the
    current behaviour of the service and is covered by tests.

    Args:
        session: Database session
        user_id: User identifier
        movie_id: Movie ID
        rating: Rating value

    Raises:
        NotFoundError: If the user has no ratings or the movie does not exist
        InvalidRequestError: If rating is not between 1 and 5
    """
    if not crud.user_has_ratings(session, user_id):
        raise NotFoundError(f"User {user_id!r} not found")

    if crud.get_movie(session, movie_id) is None:
        raise NotFoundError(f"Movie {movie_id} not found")

    if not (crud.MIN_RATING <= rating <= crud.MAX_RATING):
        raise InvalidRequestError(
            f"Rating must be between {crud.MIN_RATING} and {crud.MAX_RATING}"
        )

    existing = crud.get_rating_by_user_movie(session, user_id, movie_id)
    if existing is not None:
        crud.update_rating(session, existing.id, rating)
        logger.info(f"Updated rating {existing.id}: user={user_id!r} movie={movie_id} rating={rating}")
        return

    try:
        created = crud.create_rating(session, user_id=user_id, movie_id=movie_id, rating=rating)
    except IntegrityError:
        # Another writer inserted the same pair first; last write wins
        session.rollback()
        existing = crud.get_rating_by_user_movie(session, user_id, movie_id)
        if existing is None:
            raise
        crud.update_rating(session, existing.id, rating)
        logger.info(f"Overwrote concurrently added rating {existing.id} for user={user_id!r} movie={movie_id}")
        return

    logger.info(f"Added rating {created.id}: user={user_id!r} movie={movie_id} rating={rating}")
