"""
Movie display card component.
"""

import math
import re
from datetime import datetime
from typing import Callable

import streamlit as st

from app.models.movie import RATING_MAX, Movie

FULL_STAR = "★"
HALF_STAR = "½"
EMPTY_STAR = "☆"

# .NET backends emit up to 7 fractional digits; datetime accepts at most 6
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def render_stars(rating: float, max_stars: int = RATING_MAX) -> str:
    """
    Render a rating as a fixed-width glyph sequence.

    A half star is shown when the fractional part is at least 0.5.
    """
    rating = min(max(rating, 0), max_stars)
    full = math.floor(rating)
    half = 1 if rating - full >= 0.5 else 0
    empty = max_stars - full - half
    return FULL_STAR * full + HALF_STAR * half + EMPTY_STAR * empty


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp from the backend, or None if malformed."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(r"\1", text)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: str) -> str:
    """Format a timestamp as a locale date; unparseable values pass through."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.strftime("%x")


def render_movie_card(
    movie: Movie,
    on_edit: Callable[[Movie], None],
    on_delete: Callable[[int], None],
    on_request_delete: Callable[[Movie], None],
    on_cancel_delete: Callable[[], None],
    confirming_delete: bool = False,
) -> None:
    """
    Render a movie card with Edit and Delete actions.

    Args:
        movie: Record to display
        on_edit: Callback(movie) to open the edit form
        on_delete: Callback(movie_id), only called after confirmation
        on_request_delete: Callback(movie) when Delete is first clicked
        on_cancel_delete: Callback() when the confirmation is declined
        confirming_delete: Whether this card is awaiting delete confirmation
    """
    with st.container(border=True):
        if movie.poster_image:
            st.image(movie.poster_image)
        st.markdown(f"**{movie.title}**")
        st.caption(movie.genre)
        st.markdown(f"{render_stars(movie.rating)} ({movie.rating}/{RATING_MAX})")

        dates = [f"Created: {format_date(movie.created_at)}"]
        if movie.was_updated:
            dates.append(f"Updated: {format_date(movie.updated_at)}")
        st.caption(" | ".join(dates))

        if confirming_delete:
            st.warning(f'Are you sure you want to delete "{movie.title}"?')
            col1, col2 = st.columns(2)
            with col1:
                if st.button("Yes, delete", key=f"confirm_delete_{movie.id}", type="primary"):
                    on_delete(movie.id)
                    st.rerun()
            with col2:
                if st.button("Keep", key=f"cancel_delete_{movie.id}"):
                    on_cancel_delete()
                    st.rerun()
            return

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Edit", key=f"edit_{movie.id}"):
                on_edit(movie)
                st.rerun()
        with col2:
            if st.button("Delete", key=f"delete_{movie.id}"):
                on_request_delete(movie)
                st.rerun()
