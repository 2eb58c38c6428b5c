"""
Pydantic schemas for API request/response validation.
"""

from movies_api.api.models.movie import MovieResponse, MovieRatingResponse
from movies_api.api.models.rating import UserRatingRequest

__all__ = [
    "MovieResponse",
    "MovieRatingResponse",
    "UserRatingRequest",
]
