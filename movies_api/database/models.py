"""
SQLAlchemy ORM models for the movies database.

This module defines the Movie and UserRating tables. Genres are stored as a
single comma-separated string and user ids are free text, not linked to a
users table.
"""

from sqlalchemy import (
    Integer, Text, ForeignKey,
    CheckConstraint, UniqueConstraint, Index
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing catalog information.

    Attributes:
        id: Primary key, assigned when the catalog is seeded
        title: Movie title (required)
        year_of_release: Year the movie was released
        running_time: Running time in minutes
        genres: Comma-separated list of genres, e.g. "Crime,Drama"
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year_of_release: Mapped[int] = mapped_column(Integer, nullable=False)
    running_time: Mapped[int] = mapped_column(Integer, nullable=False)
    genres: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Indexes for common queries
    __table_args__ = (
        Index('idx_movies_title', 'title'),
        Index('idx_movies_year', 'year_of_release'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', year={self.year_of_release})>"


class UserRating(Base):
    """
    UserRating table storing one user's rating of one movie.

    Attributes:
        id: Primary key, auto-incremented
        user_id: Free-text user identifier
        movie_id: Foreign key to movies table
        rating: Rating value (1 to 5)
    """
    __tablename__ = 'user_ratings'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.id', ondelete='CASCADE'),
        nullable=False
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    # Constraints and indexes
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name='check_rating_range'),
        UniqueConstraint('user_id', 'movie_id', name='unique_user_movie'),
        Index('idx_user_ratings_user', 'user_id'),
        Index('idx_user_ratings_movie', 'movie_id'),
    )

    def __repr__(self) -> str:
        return (
            f"<UserRating(id={self.id}, user_id='{self.user_id}', "
            f"movie_id={self.movie_id}, rating={self.rating})>"
        )
