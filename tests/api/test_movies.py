"""
API tests for movie endpoints.

Uses FastAPI TestClient with the database dependency bound to a seeded
in-memory database.
"""

import pytest

from movies_api.database import crud


class TestGetMovies:
    """Tests for GET /movies."""

    def test_title_and_year(self, client):
        r = client.get("/movies", params={"year": 1994, "title": "Shawshank"})
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 1
        assert data[0] == {
            "id": 1,
            "title": "The Shawshank Redemption",
            "yearOfRelease": 1994,
            "runningTime": 142,
            "genres": "Crime,Drama",
        }

    def test_genre_returns_multiple(self, client):
        r = client.get("/movies", params={"genre": "Drama"})
        assert r.status_code == 200
        assert len(r.json()) == 3

    def test_no_filter_returns_400(self, client):
        assert client.get("/movies").status_code == 400
        assert client.get("/movies", params={"title": "", "year": 0}).status_code == 400

    def test_blank_parameters_count_as_unset(self, client):
        """Empty query values are treated as missing criteria."""
        assert client.get("/movies?title=&genre=&year=").status_code == 400

        r = client.get("/movies?title=Shawshank&genre=&year=")
        assert r.status_code == 200
        assert [m["id"] for m in r.json()] == [1]

    def test_blank_year_with_genre(self, client):
        r = client.get("/movies?genre=Comedy&year=")
        assert r.status_code == 200
        assert [m["title"] for m in r.json()] == ["Moana", "Zoolander"]

    def test_non_numeric_year_returns_400(self, client):
        assert client.get("/movies?year=nineteen").status_code == 400

    def test_no_match_returns_404(self, client):
        r = client.get("/movies", params={"title": "bad title"})
        assert r.status_code == 404


class TestTop5:
    """Tests for GET /movies/top5."""

    def test_correct_order(self, client):
        r = client.get("/movies/top5")
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 5
        assert data == sorted(data, key=lambda m: (-m["rating"], m["title"]))
        assert data[0] == {
            "id": 5,
            "title": "Pan's Labyrinth",
            "yearOfRelease": 2006,
            "runningTime": 118,
            "rating": 4.3,
        }
        assert "Zoolander" not in [m["title"] for m in data]

    def test_no_ratings_returns_404(self, empty_client):
        assert empty_client.get("/movies/top5").status_code == 404


class TestTop5ForUser:
    """Tests for GET /movies/top5/{user_id}."""

    def test_correct_order(self, client):
        r = client.get("/movies/top5/Stuart")
        assert r.status_code == 200
        data = r.json()
        assert [m["title"] for m in data] == [
            "Pan's Labyrinth",
            "The Shawshank Redemption",
            "American Beauty",
            "X-Men",
            "Moana",
        ]
        assert [m["rating"] for m in data] == [5, 5, 3, 3, 2]

    def test_unknown_user_returns_400(self, client):
        assert client.get("/movies/top5/bad user").status_code == 400


class TestUserRating:
    """Tests for PUT /movies/userRating."""

    def test_update_existing(self, client, db_manager):
        r = client.put("/movies/userRating", json={"userId": "Mary", "movieId": 1, "rating": 4})
        assert r.status_code == 204
        assert r.content == b""

        with db_manager.session_scope() as session:
            assert crud.get_rating_by_user_movie(session, "Mary", 1).rating == 4
            assert crud.get_rating_count(session, "Mary") == 5

        top = client.get("/movies/top5/Mary").json()
        assert {"title": "The Shawshank Redemption", "rating": 4} in [
            {"title": m["title"], "rating": m["rating"]} for m in top
        ]

    def test_add_for_known_user(self, client, db_manager):
        r = client.put("/movies/userRating", json={"userId": "Wendy", "movieId": 1, "rating": 5})
        assert r.status_code == 204

        with db_manager.session_scope() as session:
            assert crud.get_rating_by_user_movie(session, "Wendy", 1) is not None

    def test_snake_case_body_accepted(self, client):
        r = client.put("/movies/userRating", json={"user_id": "Mary", "movie_id": 2, "rating": 5})
        assert r.status_code == 204

    @pytest.mark.parametrize("movie_id, user_id", [
        (1, "bad user"),  # user has no ratings
        (72, "Mary"),     # movie does not exist
    ])
    def test_not_found(self, client, movie_id, user_id):
        r = client.put("/movies/userRating", json={"userId": user_id, "movieId": movie_id, "rating": 1})
        assert r.status_code == 404

    def test_movie_id_beyond_integer_range_returns_404(self, client):
        r = client.put("/movies/userRating", json={"userId": "Mary", "movieId": 2 ** 63, "rating": 3})
        assert r.status_code == 404

    def test_missing_user_returns_404(self, client):
        r = client.put("/movies/userRating", json={"movieId": 1, "rating": 1})
        assert r.status_code == 404

    @pytest.mark.parametrize("value", [6, 0, -1])
    def test_rating_out_of_range_returns_400(self, client, value):
        r = client.put("/movies/userRating", json={"userId": "Mary", "movieId": 1, "rating": value})
        assert r.status_code == 400

    def test_malformed_body_returns_422(self, client):
        r = client.put("/movies/userRating", json={"userId": "Mary", "rating": 3})
        assert r.status_code == 422


class TestSystem:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["movies"] == 6
        assert data["ratings"] == 16
