"""
Page controller: orchestrates API calls and view model transitions.

Functions take the backend client as a parameter (defaulting to the
api_client module) so the page can be driven against a fake backend.
"""

import logging

from app.models.movie import Movie, MovieCreate
from app.ui.utils import api_client
from app.ui.utils.api_client import MovieApiError
from app.ui.utils.session_state import (
    CatalogState,
    FormMode,
    begin_load,
    cancel_delete,
    close_form,
    dismiss_error,
    fail_load,
    finish_load,
    invalidate,
    open_edit_form,
    set_error,
)

logger = logging.getLogger(__name__)


def load_movies(state: CatalogState, client=api_client) -> None:
    """Reload the full list for the current search and sort."""
    seq = begin_load(state)
    search, sort = state.query
    try:
        movies = client.list_movies(search or None, sort)
    except MovieApiError as e:
        logger.error("Error loading movies: %s", e)
        fail_load(state, seq, str(e))
        return
    if not finish_load(state, seq, movies):
        logger.debug("Discarded stale list response #%d", seq)


def refresh_if_needed(state: CatalogState, client=api_client) -> None:
    """Load on first render and whenever search or sort changed."""
    if state.needs_reload:
        load_movies(state, client)


def save_movie(state: CatalogState, dto: MovieCreate, client=api_client) -> Movie:
    """
    Create or update depending on the form mode, then reload the list.

    Raises:
        MovieApiError: Re-raised after being recorded on the page, so the
            form can show it as well.
    """
    editing = state.editing if state.form_mode == FormMode.EDIT else None
    try:
        if editing is not None:
            saved = client.update_movie(editing.id, dto)
        else:
            saved = client.create_movie(dto)
    except MovieApiError as e:
        action = "update" if editing is not None else "create"
        logger.error("Failed to %s movie: %s", action, e)
        set_error(state, str(e))
        raise
    logger.info("Saved movie #%s %r", saved.id, saved.title)
    close_form(state)
    dismiss_error(state)
    invalidate(state)
    load_movies(state, client)
    return saved


def delete_movie(state: CatalogState, movie_id: int, client=api_client) -> bool:
    """Delete after confirmation and reload. Returns False on failure."""
    cancel_delete(state)
    try:
        client.delete_movie(movie_id)
    except MovieApiError as e:
        logger.error("Failed to delete movie #%s: %s", movie_id, e)
        set_error(state, str(e))
        return False
    logger.info("Deleted movie #%s", movie_id)
    invalidate(state)
    load_movies(state, client)
    return True


def start_edit(state: CatalogState, movie: Movie, client=api_client) -> bool:
    """Open the edit form pre-filled with the server's latest copy of `movie`."""
    try:
        latest = client.get_movie(movie.id)
    except MovieApiError as e:
        logger.error("Failed to fetch movie #%s: %s", movie.id, e)
        set_error(state, str(e))
        return False
    open_edit_form(state, latest)
    return True


def empty_message(state: CatalogState) -> str:
    if state.search:
        return "No movies found matching your search."
    return "No movies yet. Create your first movie!"
