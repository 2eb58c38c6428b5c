"""
Query engine for the movie catalog.

Pure functions over ordered sequences of movie and rating records. Records
only need the attributes of the ORM models (``id``, ``title``,
``year_of_release``, ``running_time``, ``genres`` for movies and
``user_id``, ``movie_id``, ``rating`` for ratings), so plain objects work
as well as database rows.

Pipelines are composed as filter -> group -> aggregate -> join -> sort ->
truncate. The order of those steps matters for tie-breaks and is kept
exactly as documented on each function.
"""

from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

TOP_N = 5


@dataclass(frozen=True)
class MovieFilter:
    """Optional lookup criteria. Empty strings and year 0 count as unset."""

    title: Optional[str] = None
    year: int = 0
    genre: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.title and not self.genre and not self.year


@dataclass
class MovieReturnItem:
    """A movie projected together with a rating value."""

    id: int
    title: str
    year_of_release: int
    running_time: int
    rating: float


def matches_filter(movie: Any, movie_filter: MovieFilter) -> bool:
    """
    Check whether a movie satisfies any supplied criterion.

    Criteria are OR-ed: exact year, or case-sensitive substring of the title,
    or case-sensitive substring of the genres string.
    """
    if movie_filter.year and movie.year_of_release == movie_filter.year:
        return True
    if movie_filter.title and movie_filter.title in movie.title:
        return True
    if movie_filter.genre and movie_filter.genre in movie.genres:
        return True
    return False


def filter_movies(movies: Iterable[Any], movie_filter: MovieFilter) -> List[Any]:
    """Return the movies matching ``movie_filter``, in input order."""
    return [movie for movie in movies if matches_filter(movie, movie_filter)]


def round_rating(value: Decimal) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def average_ratings(ratings: Iterable[Any]) -> "OrderedDict[int, Decimal]":
    """
    Group ratings by movie id and compute the exact mean for each movie.

    Returns:
        Mapping of movie id to mean rating, in order of first appearance
    """
    totals: "OrderedDict[int, Tuple[int, int]]" = OrderedDict()
    for r in ratings:
        total, count = totals.get(r.movie_id, (0, 0))
        totals[r.movie_id] = (total + r.rating, count + 1)

    return OrderedDict(
        (movie_id, Decimal(total) / Decimal(count))
        for movie_id, (total, count) in totals.items()
    )


def to_return_item(movie: Any, rating: float) -> MovieReturnItem:
    return MovieReturnItem(
        id=movie.id,
        title=movie.title,
        year_of_release=movie.year_of_release,
        running_time=movie.running_time,
        rating=rating,
    )


def sort_by_rating(items: Iterable[MovieReturnItem]) -> List[MovieReturnItem]:
    """Sort by rating descending, then title ascending."""
    return sorted(items, key=lambda item: (-item.rating, item.title))


def top_rated(
    movies: Iterable[Any],
    ratings: Iterable[Any],
    limit: int = TOP_N,
) -> List[MovieReturnItem]:
    """
    Rank movies by the mean of all their ratings.

    Means are rounded before sorting, so two movies whose means round to the
    same value are ordered by title. Movies without ratings are left out,
    as are ratings whose movie is missing from ``movies``.
    """
    by_id: Dict[int, Any] = {movie.id: movie for movie in movies}

    items = [
        to_return_item(by_id[movie_id], round_rating(mean))
        for movie_id, mean in average_ratings(ratings).items()
        if movie_id in by_id
    ]
    return sort_by_rating(items)[:limit]


def top_rated_for_user(
    movies: Iterable[Any],
    user_ratings: Sequence[Any],
    limit: int = TOP_N,
) -> List[MovieReturnItem]:
    """
    Rank one user's rated movies by the user's own rating.

    The user's ratings are truncated to ``limit`` by rating value first,
    keeping input order among equal values, and only then joined to movies
    and re-sorted with the title tie-break. A tie straddling the cut-off is
    therefore decided by input order, not by title.
    """
    by_id: Dict[int, Any] = {movie.id: movie for movie in movies}

    selected = sorted(user_ratings, key=lambda r: -r.rating)[:limit]
    items = [
        to_return_item(by_id[r.movie_id], r.rating)
        for r in selected
        if r.movie_id in by_id
    ]
    return sort_by_rating(items)
