"""
Shared fixtures: an in-memory fake of the movie backend.

The fake implements the /api/Movies REST contract and is installed by
patching requests.request, so the real API client code runs unchanged.
"""

import json
from datetime import datetime, timedelta, timezone
from http import HTTPStatus
from unittest.mock import patch
from urllib.parse import urlsplit

import pytest
import requests

BASE_URL = "http://movies.test"


def make_response(status: int, body=None, text: str = "", url: str = BASE_URL) -> requests.Response:
    """Build a real requests.Response with a JSON or text body."""
    r = requests.Response()
    r.status_code = status
    r.reason = HTTPStatus(status).phrase
    r.url = url
    r.encoding = "utf-8"
    if body is not None:
        r._content = json.dumps(body).encode("utf-8")
        r.headers["Content-Type"] = "application/json"
    else:
        r._content = text.encode("utf-8")
    return r


class FakeMoviesBackend:
    """In-memory stand-in for the remote movie API."""

    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.movies: dict[int, dict] = {}
        self.next_id = 1
        self.calls: list[tuple[str, str, dict | None, dict | None]] = []
        # When set, every request fails as if the host refused the connection
        self.down = False
        self._clock = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def _now(self) -> str:
        self._clock += timedelta(minutes=1)
        # .NET-style timestamp with 7 fractional digits
        return self._clock.strftime("%Y-%m-%dT%H:%M:%S") + ".1234567Z"

    def seed(self, title: str, genre: str = "Drama", rating: int = 3, poster_image=None) -> dict:
        now = self._now()
        movie = {
            "id": self.next_id,
            "title": title,
            "genre": genre,
            "rating": rating,
            "posterImage": poster_image,
            "createdAt": now,
            "updatedAt": now,
        }
        self.movies[self.next_id] = movie
        self.next_id += 1
        return movie

    @staticmethod
    def _invalid(body: dict | None) -> bool:
        if not body:
            return True
        if not body.get("title") or not body.get("genre"):
            return True
        return not isinstance(body.get("rating"), int) or not 1 <= body["rating"] <= 5

    def __call__(self, method, url, params=None, json=None, timeout=None, **kwargs):
        self.calls.append((method, url, params, json))
        if self.down:
            raise requests.ConnectionError("connection refused")
        path = urlsplit(url).path
        parts = path.strip("/").split("/")
        if parts[:2] != ["api", "Movies"]:
            return make_response(404, url=url)
        movie_id = int(parts[2]) if len(parts) > 2 else None

        if method == "GET" and movie_id is None:
            params = params or {}
            search = (params.get("search") or "").lower()
            items = [m for m in self.movies.values() if search in m["title"].lower()]
            items.sort(key=lambda m: m["title"].lower(), reverse=params.get("sort") == "desc")
            return make_response(200, items, url=url)

        if method == "POST" and movie_id is None:
            if self._invalid(json):
                return make_response(
                    400, {"title": "One or more validation errors occurred.", "status": 400}, url=url
                )
            return make_response(
                201,
                self.seed(json["title"], json["genre"], json["rating"], json.get("posterImage")),
                url=url,
            )

        if movie_id not in self.movies:
            if method == "DELETE":
                return make_response(404, url=url)
            return make_response(404, {"message": f"Movie with ID {movie_id} not found"}, url=url)

        if method == "GET":
            return make_response(200, self.movies[movie_id], url=url)
        if method == "PUT":
            if self._invalid(json):
                return make_response(
                    400, {"title": "One or more validation errors occurred.", "status": 400}, url=url
                )
            movie = self.movies[movie_id]
            movie.update(
                title=json["title"],
                genre=json["genre"],
                rating=json["rating"],
                posterImage=json.get("posterImage"),
                updatedAt=self._now(),
            )
            return make_response(200, movie, url=url)
        if method == "DELETE":
            del self.movies[movie_id]
            return make_response(204, url=url)
        return make_response(405, url=url)


@pytest.fixture
def base_url(monkeypatch):
    """Point the client at the fake backend host."""
    monkeypatch.setenv("MOVIE_API_URL", BASE_URL + "/")
    return BASE_URL


@pytest.fixture
def backend(base_url):
    """Install the fake backend in place of the network."""
    fake = FakeMoviesBackend(base_url)
    with patch("app.ui.utils.api_client.requests.request", side_effect=fake):
        yield fake
