"""
Pydantic schemas for Rating API.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class UserRatingRequest(BaseModel):
    """
    Request body for adding or updating a rating.

    The rating range is checked by the upsert logic rather than here, so an
    out-of-range value is answered with 400 instead of a validation error.
    """

    user_id: str | None = None
    movie_id: int
    rating: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
