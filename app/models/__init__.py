"""
Pydantic schemas for movie records and create/update payloads.
"""

from app.models.movie import Movie, MovieCreate, MovieUpdate

__all__ = [
    "Movie",
    "MovieCreate",
    "MovieUpdate",
]
