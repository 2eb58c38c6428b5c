"""
CRUD operations for Movie and UserRating models.

Query helpers return rows in primary key order, which is the store
iteration order the query engine relies on.
"""

from typing import List, Optional
from sqlalchemy import func, and_
from sqlalchemy.orm import Session

from movies_api.database.models import Movie, UserRating


MIN_RATING = 1
MAX_RATING = 5

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -2 ** 63
SQLITE_INT_MAX = 2 ** 63 - 1


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    movie_id: int,
    title: str,
    year_of_release: int,
    running_time: int,
    genres: str = ""
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        movie_id: Movie ID
        title: Movie title
        year_of_release: Year the movie was released
        running_time: Running time in minutes
        genres: Comma-separated genres

    Returns:
        Created Movie object
    """
    movie = Movie(
        id=movie_id,
        title=title,
        year_of_release=year_of_release,
        running_time=running_time,
        genres=genres
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    if not (SQLITE_INT_MIN <= movie_id <= SQLITE_INT_MAX):
        return None
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(session: Session) -> List[Movie]:
    """
    Get every movie in the catalog, ordered by ID.

    Args:
        session: Database session

    Returns:
        List of Movie objects
    """
    return session.query(Movie).order_by(Movie.id).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


# ==================== RATING CRUD OPERATIONS ====================

def _check_rating_value(rating: int) -> None:
    if not (MIN_RATING <= rating <= MAX_RATING):
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")


def create_rating(
    session: Session,
    user_id: str,
    movie_id: int,
    rating: int
) -> UserRating:
    """
    Create a new rating.

    Args:
        session: Database session
        user_id: User identifier
        movie_id: Movie ID
        rating: Rating value (1 to 5)

    Returns:
        Created UserRating object

    Raises:
        ValueError: If rating is not between 1 and 5
    """
    _check_rating_value(rating)

    rating_obj = UserRating(
        user_id=user_id,
        movie_id=movie_id,
        rating=rating
    )
    session.add(rating_obj)
    session.commit()
    session.refresh(rating_obj)
    return rating_obj


def get_rating(session: Session, rating_id: int) -> Optional[UserRating]:
    """
    Get a rating by ID.

    Args:
        session: Database session
        rating_id: Rating ID

    Returns:
        UserRating object or None if not found
    """
    return session.query(UserRating).filter(UserRating.id == rating_id).first()


def get_rating_by_user_movie(
    session: Session,
    user_id: str,
    movie_id: int
) -> Optional[UserRating]:
    """
    Get a rating by user and movie.

    Args:
        session: Database session
        user_id: User identifier
        movie_id: Movie ID

    Returns:
        UserRating object or None if not found
    """
    return session.query(UserRating).filter(
        and_(UserRating.user_id == user_id, UserRating.movie_id == movie_id)
    ).first()


def get_ratings_by_user(session: Session, user_id: str) -> List[UserRating]:
    """
    Get all ratings by a specific user, ordered by rating ID.

    Args:
        session: Database session
        user_id: User identifier

    Returns:
        List of UserRating objects
    """
    return session.query(UserRating).filter(
        UserRating.user_id == user_id
    ).order_by(UserRating.id).all()


def user_has_ratings(session: Session, user_id: Optional[str]) -> bool:
    """
    Check whether a user has rated at least one movie.

    Args:
        session: Database session
        user_id: User identifier; None never matches

    Returns:
        True if a rating row exists for the user
    """
    if user_id is None:
        return False
    return session.query(UserRating.id).filter(
        UserRating.user_id == user_id
    ).first() is not None


def get_all_ratings(session: Session) -> List[UserRating]:
    """
    Get every rating, ordered by rating ID.

    Args:
        session: Database session

    Returns:
        List of UserRating objects
    """
    return session.query(UserRating).order_by(UserRating.id).all()


def update_rating(
    session: Session,
    rating_id: int,
    new_rating: int
) -> Optional[UserRating]:
    """
    Update a rating value in place.

    Args:
        session: Database session
        rating_id: Rating ID
        new_rating: New rating value (1 to 5)

    Returns:
        Updated UserRating object or None if not found

    Raises:
        ValueError: If rating is not between 1 and 5
    """
    _check_rating_value(new_rating)

    rating = get_rating(session, rating_id)
    if rating:
        rating.rating = new_rating
        session.commit()
        session.refresh(rating)
    return rating


def get_rating_count(session: Session, user_id: Optional[str] = None) -> int:
    """
    Get count of ratings, optionally restricted to one user.

    Args:
        session: Database session
        user_id: Only count this user's ratings when given

    Returns:
        Number of ratings
    """
    query = session.query(func.count(UserRating.id))
    if user_id is not None:
        query = query.filter(UserRating.user_id == user_id)
    return query.scalar()
