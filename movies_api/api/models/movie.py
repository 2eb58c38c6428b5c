"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class MovieResponse(BaseModel):
    """Response model for a single catalog movie."""

    id: int
    title: str
    year_of_release: int
    running_time: int
    genres: str  # comma-separated

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class MovieRatingResponse(BaseModel):
    """Response model for a movie with an average or user rating."""

    id: int
    title: str
    year_of_release: int
    running_time: int
    rating: float

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
