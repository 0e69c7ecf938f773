"""
Pydantic schemas for the Movie resource.

Field names follow the backend's camelCase JSON; Python code uses the
snake_case attribute names.
"""

from pydantic import BaseModel, ConfigDict, Field

TITLE_MAX_LENGTH = 200
GENRE_MAX_LENGTH = 100
RATING_MIN = 1
RATING_MAX = 5


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    genre: str = Field(..., min_length=1, max_length=GENRE_MAX_LENGTH)
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX)
    poster_image: str | None = Field(None, alias="posterImage")

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """JSON body as the backend expects it."""
        return self.model_dump(by_alias=True)


class MovieUpdate(MovieCreate):
    """Request body for updating a movie (same fields as create)."""


class Movie(BaseModel):
    """A movie record as returned by the backend."""

    id: int
    title: str
    genre: str
    rating: int
    poster_image: str | None = Field(None, alias="posterImage")
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def was_updated(self) -> bool:
        return self.updated_at != self.created_at
