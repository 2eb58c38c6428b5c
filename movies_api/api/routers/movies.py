"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.orm import Session

from movies_api.api.dependencies import get_db
from movies_api.api.models.movie import MovieResponse, MovieRatingResponse
from movies_api.api.models.rating import UserRatingRequest
from movies_api.core import catalog, ratings
from movies_api.core.errors import InvalidRequestError, NotFoundError

router = APIRouter(prefix="/movies", tags=["movies"])


def _parse_year(year: str | None) -> int:
    """Parse the year query value; a blank value means no year filter."""
    if year is None or not year.strip():
        return 0
    try:
        return int(year)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid year: {year!r}")


@router.get("", response_model=list[MovieResponse])
def get_movies(
    title: str | None = Query(None),
    year: str | None = Query(None),
    genre: str | None = Query(None),
    db: Session = Depends(get_db),
):
    """Find movies matching any of title, year or genre."""
    try:
        movies = catalog.find_movies(db, title=title, year=_parse_year(year), genre=genre)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/top5", response_model=list[MovieRatingResponse])
def get_top5_rated_movies(db: Session = Depends(get_db)):
    """Top 5 movies by average rating."""
    try:
        items = catalog.top_rated_movies(db)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [MovieRatingResponse.model_validate(i) for i in items]


@router.get("/top5/{user_id}", response_model=list[MovieRatingResponse])
def get_top5_rated_movies_for_user(user_id: str, db: Session = Depends(get_db)):
    """Top 5 movies by a user's own ratings."""
    try:
        items = catalog.top_rated_movies_for_user(db, user_id)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [MovieRatingResponse.model_validate(i) for i in items]


@router.put("/userRating", status_code=status.HTTP_204_NO_CONTENT)
def put_user_rating(rating_in: UserRatingRequest, db: Session = Depends(get_db)):
    """Add a user rating, or update it if the user already rated the movie."""
    try:
        ratings.upsert_user_rating(
            db,
            user_id=rating_in.user_id,
            movie_id=rating_in.movie_id,
            rating=rating_in.rating,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
