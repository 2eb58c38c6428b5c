"""
Fixture data for the movie catalog.

Seeding is an explicit step: nothing here runs on import or on connection.
"""

import logging
from sqlalchemy.orm import Session

from movies_api.database.models import Movie, UserRating

logger = logging.getLogger(__name__)


SEED_MOVIES = [
    {"id": 1, "title": "The Shawshank Redemption", "year_of_release": 1994,
     "running_time": 142, "genres": "Crime,Drama"},
    {"id": 2, "title": "American Beauty", "year_of_release": 1999,
     "running_time": 122, "genres": "Drama"},
    {"id": 3, "title": "Moana", "year_of_release": 2016,
     "running_time": 107, "genres": "Animation, Adventure, Comedy"},
    {"id": 4, "title": "X-Men", "year_of_release": 2000,
     "running_time": 104, "genres": "Action,Adventure,Sci-fi"},
    {"id": 5, "title": "Pan's Labyrinth", "year_of_release": 2006,
     "running_time": 118, "genres": "Drama, Fantasy"},
    {"id": 6, "title": "Zoolander", "year_of_release": 2001,
     "running_time": 90, "genres": "Comedy"},
]

# (user_id, movie_id, rating), inserted in this order
SEED_RATINGS = [
    ("Stuart", 1, 5),
    ("Stuart", 2, 3),
    ("Stuart", 3, 2),
    ("Stuart", 4, 3),
    ("Stuart", 5, 5),
    ("Stuart", 6, 2),
    ("Mary", 1, 3),
    ("Mary", 2, 2),
    ("Mary", 3, 3),
    ("Mary", 4, 4),
    ("Mary", 5, 5),
    ("Wendy", 2, 3),
    ("Wendy", 3, 3),
    ("Wendy", 4, 3),
    ("Wendy", 5, 3),
    ("Wendy", 6, 3),
]


def seed_database(session: Session) -> None:
    """
    Insert fixture movies and ratings, skipping rows that already exist.

    Args:
        session: Database session
    """
    added_movies = 0
    for data in SEED_MOVIES:
        if session.get(Movie, data["id"]) is None:
            session.add(Movie(**data))
            added_movies += 1
    session.flush()

    added_ratings = 0
    for user_id, movie_id, rating in SEED_RATINGS:
        existing = session.query(UserRating).filter(
            UserRating.user_id == user_id,
            UserRating.movie_id == movie_id
        ).first()
        if existing is None:
            session.add(UserRating(user_id=user_id, movie_id=movie_id, rating=rating))
            # Flush per row so ids follow insertion order
            session.flush()
            added_ratings += 1

    session.commit()
    logger.info(f"Seeded {added_movies} movies and {added_ratings} ratings")
