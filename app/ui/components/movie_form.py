"""
Movie create/edit form component.
"""

import html
from dataclasses import dataclass
from typing import Callable

import streamlit as st

from app.models.movie import (
    GENRE_MAX_LENGTH,
    RATING_MAX,
    RATING_MIN,
    TITLE_MAX_LENGTH,
    Movie,
    MovieCreate,
    MovieUpdate,
)
from app.ui.utils.api_client import MovieApiError

RATING_ERROR = f"Rating must be a whole number between {RATING_MIN} and {RATING_MAX}"


@dataclass
class FormState:
    """Submission status of one form instance."""

    submitting: bool = False
    error: str | None = None
    # Validated payload waiting to be sent on the next run
    pending: MovieCreate | None = None


def parse_rating(value: str) -> int | None:
    """Return the rating as an int, or None unless it is a whole number in range."""
    try:
        number = float(value.strip())
    except ValueError:
        return None
    if not number.is_integer():
        return None
    number = int(number)
    if not RATING_MIN <= number <= RATING_MAX:
        return None
    return number


def is_rating_keystroke_allowed(value: str) -> bool:
    """Live filter for the rating field: empty or a valid rating."""
    return value == "" or parse_rating(value) is not None


def validate_movie_input(
    title: str,
    genre: str,
    rating: str,
    poster_image: str,
    schema: type[MovieCreate] = MovieCreate,
) -> MovieCreate:
    """
    Validate raw form values and build the request DTO.

    Args:
        title: Title as typed
        genre: Genre as typed
        rating: Rating field text
        poster_image: Poster URL as typed; blank means no poster
        schema: MovieCreate or MovieUpdate

    Returns:
        DTO with trimmed values.

    Raises:
        ValueError: With the message to show next to the form
    """
    title = title.strip()
    genre = genre.strip()
    if not title or not genre:
        raise ValueError("Title and genre are required")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValueError(f"Title must be {TITLE_MAX_LENGTH} characters or fewer")
    if len(genre) > GENRE_MAX_LENGTH:
        raise ValueError(f"Genre must be {GENRE_MAX_LENGTH} characters or fewer")
    rating_value = parse_rating(rating)
    if rating_value is None:
        raise ValueError(RATING_ERROR)
    return schema(
        title=title,
        genre=genre,
        rating=rating_value,
        poster_image=poster_image.strip() or None,
    )


def begin_submit(
    form: FormState,
    title: str,
    genre: str,
    rating: str,
    poster_image: str,
    schema: type[MovieCreate] = MovieCreate,
) -> bool:
    """
    Validate the form and queue the DTO for the next script run.

    Ignored while a previous submission is in flight. Validation errors are
    stored on `form.error`; field values are left untouched.

    Returns:
        True if a submission was queued.
    """
    if form.submitting:
        return False
    form.error = None
    try:
        dto = validate_movie_input(title, genre, rating, poster_image, schema=schema)
    except ValueError as e:
        form.error = str(e)
        return False
    form.pending = dto
    form.submitting = True
    return True


def complete_submit(form: FormState, on_submit: Callable[[MovieCreate], object]) -> bool:
    """
    Hand the queued DTO to `on_submit` exactly once.

    Backend errors are stored on `form.error`.

    Returns:
        True if `on_submit` completed without error.
    """
    dto = form.pending
    form.pending = None
    if not form.submitting or dto is None:
        form.submitting = False
        return False
    try:
        on_submit(dto)
    except MovieApiError as e:
        form.error = str(e)
        return False
    finally:
        form.submitting = False
    return True


def _field_key(form_key: str, name: str) -> str:
    return f"{form_key}_{name}"


def _init_fields(form_key: str, movie: Movie | None) -> None:
    """Seed widget state once per form instance."""
    if _field_key(form_key, "title") in st.session_state:
        return
    rating = str(movie.rating) if movie and movie.rating else "1"
    st.session_state[_field_key(form_key, "title")] = movie.title if movie else ""
    st.session_state[_field_key(form_key, "genre")] = movie.genre if movie else ""
    st.session_state[_field_key(form_key, "rating")] = rating
    st.session_state[_field_key(form_key, "rating_prev")] = rating
    st.session_state[_field_key(form_key, "poster")] = (movie.poster_image or "") if movie else ""
    st.session_state[_field_key(form_key, "state")] = FormState()


def _clear_fields(form_key: str) -> None:
    for name in ("title", "genre", "rating", "rating_prev", "poster", "state"):
        st.session_state.pop(_field_key(form_key, name), None)


def _filter_rating(form_key: str) -> None:
    """Revert the rating field if the new text is not an allowed value."""
    key = _field_key(form_key, "rating")
    prev_key = _field_key(form_key, "rating_prev")
    if is_rating_keystroke_allowed(st.session_state[key]):
        st.session_state[prev_key] = st.session_state[key]
    else:
        st.session_state[key] = st.session_state[prev_key]


def render_poster_preview(url: str) -> None:
    """Show a poster preview that hides itself if the image fails to load."""
    st.markdown(
        f'<img src="{html.escape(url, quote=True)}" alt="" '
        'style="width:100%;max-height:12rem;object-fit:cover;border-radius:0.375rem" '
        "onerror=\"this.style.display='none'\">",
        unsafe_allow_html=True,
    )


def render_movie_form(
    movie: Movie | None,
    on_submit: Callable[[MovieCreate], object],
    on_cancel: Callable[[], None],
) -> None:
    """
    Render the create form (movie is None) or the edit form for `movie`.

    Args:
        movie: Record to edit, or None to create
        on_submit: Called with the validated DTO; may raise MovieApiError
        on_cancel: Called when the user cancels
    """
    form_key = f"movie_form_{movie.id}" if movie else "movie_form_new"
    _init_fields(form_key, movie)
    form: FormState = st.session_state[_field_key(form_key, "state")]
    schema = MovieUpdate if movie else MovieCreate

    st.subheader("Edit Movie" if movie else "Create New Movie")
    if form.error:
        st.error(form.error)

    title = st.text_input(
        "Title *",
        key=_field_key(form_key, "title"),
        max_chars=TITLE_MAX_LENGTH,
        placeholder="Enter movie title",
    )
    st.caption(f"{len(title)}/{TITLE_MAX_LENGTH}")

    genre = st.text_input(
        "Genre *",
        key=_field_key(form_key, "genre"),
        max_chars=GENRE_MAX_LENGTH,
        placeholder="Enter movie genre (e.g., Action, Drama, Comedy)",
    )
    st.caption(f"{len(genre)}/{GENRE_MAX_LENGTH}")

    rating = st.text_input(
        f"Rating * ({RATING_MIN}-{RATING_MAX})",
        key=_field_key(form_key, "rating"),
        on_change=_filter_rating,
        args=(form_key,),
        placeholder=f"Enter rating ({RATING_MIN}-{RATING_MAX})",
    )
    st.caption(f"Rating: {rating}/{RATING_MAX}")

    poster_image = st.text_input(
        "Poster Image URL",
        key=_field_key(form_key, "poster"),
        placeholder="Enter poster image URL",
    )
    if poster_image.strip():
        st.caption("Preview:")
        render_poster_preview(poster_image.strip())

    if form.submitting:
        label = "Saving..."
    else:
        label = "Update Movie" if movie else "Create Movie"
    col1, col2 = st.columns(2)
    with col1:
        submitted = st.button(
            label, key=_field_key(form_key, "submit"), type="primary", disabled=form.submitting
        )
    with col2:
        cancelled = st.button("Cancel", key=_field_key(form_key, "cancel"), disabled=form.submitting)

    if cancelled:
        _clear_fields(form_key)
        on_cancel()
        st.rerun()
    # The disabled "Saving..." button is already on screen while this runs
    if form.submitting:
        if complete_submit(form, on_submit):
            _clear_fields(form_key)
        st.rerun()
    if submitted:
        begin_submit(form, title, genre, rating, poster_image, schema=schema)
        st.rerun()
