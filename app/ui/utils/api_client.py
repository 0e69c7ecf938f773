"""
Movie backend REST client for the Streamlit UI.

Wraps the /api/Movies endpoints and normalizes network and HTTP failures
into MovieApiError subclasses with user-facing messages.
"""

import logging

import requests
from pydantic import ValidationError

from app.config import get_api_base_url, get_request_timeout
from app.models.movie import Movie, MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)

MOVIES_PATH = "/api/Movies"


class MovieApiError(Exception):
    """Base error for movie backend calls."""


class ApiConnectionError(MovieApiError):
    """Backend could not be reached at all."""

    def __init__(self, base_url: str):
        self.base_url = base_url
        super().__init__(
            f"Cannot connect to backend API at {base_url}. Make sure the backend is running."
        )


class ApiResponseError(MovieApiError):
    """Backend answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class UnexpectedResponseError(ApiResponseError):
    """Backend answered with success but the body is not a usable movie payload."""

    def __init__(self, detail: str, status_code: int):
        super().__init__(f"Unexpected response from backend: {detail}", status_code)


def _request(method: str, path: str, **kwargs) -> requests.Response:
    """Send a request to the backend, mapping connection-level failures."""
    base_url = get_api_base_url()
    url = f"{base_url}{path}"
    logger.debug("%s %s params=%s", method, url, kwargs.get("params"))
    try:
        return requests.request(method, url, timeout=get_request_timeout(), **kwargs)
    except (requests.ConnectionError, requests.Timeout) as e:
        logger.warning("Backend unreachable at %s: %s", base_url, e)
        raise ApiConnectionError(base_url) from e


def _error_message(response: requests.Response, action: str, structured: bool = True) -> str:
    """
    Build a user-facing message for a failed response.

    With `structured`, prefers the `message` or `title` field of a JSON error
    body. Otherwise, or when the body is not JSON, falls back to the status
    line plus any raw body text.
    """
    message = f"Failed to {action}: {response.status_code} {response.reason}"
    text = response.text
    if structured:
        try:
            body = response.json()
        except ValueError:
            pass
        else:
            if isinstance(body, dict):
                return body.get("message") or body.get("title") or message
            return message
    return f"{message}. {text}" if text else message


def _raise_for_status(response: requests.Response, action: str, structured: bool = True) -> None:
    if response.ok:
        return
    message = _error_message(response, action, structured=structured)
    logger.warning("Backend error %s: %s", response.status_code, message)
    raise ApiResponseError(message, response.status_code)


def _parse_json(response: requests.Response):
    """Decode a success body, mapping malformed JSON to UnexpectedResponseError."""
    try:
        return response.json()
    except ValueError as e:
        logger.warning("Backend sent a non-JSON body (%s): %r", response.status_code, response.text[:200])
        raise UnexpectedResponseError("response body is not JSON", response.status_code) from e


def _parse_movie(data, status_code: int) -> Movie:
    try:
        return Movie.model_validate(data)
    except ValidationError as e:
        logger.warning("Backend record does not match the movie schema: %s", e)
        raise UnexpectedResponseError("record does not match the movie schema", status_code) from e


def list_movies(search: str | None = None, sort: str = "asc") -> list[Movie]:
    """
    List movies, optionally filtered by title substring.

    Args:
        search: Case-insensitive title substring; omitted when empty
        sort: 'asc' or 'desc' order by title

    Returns:
        Full matching collection (no pagination).
    """
    params = {}
    if search:
        params["search"] = search
    params["sort"] = sort
    r = _request("GET", MOVIES_PATH, params=params)
    _raise_for_status(r, "fetch movies", structured=False)
    data = _parse_json(r)
    if not isinstance(data, list):
        raise UnexpectedResponseError("expected a list of movies", r.status_code)
    return [_parse_movie(item, r.status_code) for item in data]


def get_movie(movie_id: int) -> Movie:
    """Get a single movie by ID."""
    r = _request("GET", f"{MOVIES_PATH}/{movie_id}")
    _raise_for_status(r, "fetch movie")
    return _parse_movie(_parse_json(r), r.status_code)


def create_movie(dto: MovieCreate) -> Movie:
    """Create a movie; the backend assigns id and timestamps."""
    r = _request("POST", MOVIES_PATH, json=dto.to_payload())
    _raise_for_status(r, "create movie")
    return _parse_movie(_parse_json(r), r.status_code)


def update_movie(movie_id: int, dto: MovieUpdate) -> Movie:
    """
    Replace the editable fields of a movie.

    A 204 No Content answer is followed by a GET for the stored record.
    """
    r = _request("PUT", f"{MOVIES_PATH}/{movie_id}", json=dto.to_payload())
    _raise_for_status(r, "update movie")
    if r.status_code == 204 or not r.content:
        return get_movie(movie_id)
    return _parse_movie(_parse_json(r), r.status_code)


def delete_movie(movie_id: int) -> None:
    """Delete a movie. Raises ApiResponseError if it does not exist."""
    r = _request("DELETE", f"{MOVIES_PATH}/{movie_id}")
    _raise_for_status(r, "delete movie")
