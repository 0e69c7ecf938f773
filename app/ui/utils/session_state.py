"""
Page view model and its transitions, stored in Streamlit session state.

All page state lives in a single CatalogState object. Rendering code reads
it; only the transition functions below mutate it.
"""

from dataclasses import dataclass, field
from enum import Enum

import streamlit as st

from app.models.movie import Movie

STATE_KEY = "catalog"


class FormMode(str, Enum):
    NONE = "none"
    CREATE = "create"
    EDIT = "edit"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class CatalogState:
    """Everything the movie page shows or remembers between reruns."""

    movies: list[Movie] = field(default_factory=list)
    loading: bool = True
    error: str | None = None
    search: str = ""
    sort: SortOrder = SortOrder.ASC
    form_mode: FormMode = FormMode.NONE
    editing: Movie | None = None
    pending_delete: Movie | None = None
    # Sequence of the most recently issued list request
    request_seq: int = 0
    # Search/sort the current list was loaded with; None forces a reload
    loaded_query: tuple[str, str] | None = None

    @property
    def query(self) -> tuple[str, str]:
        return (self.search, self.sort.value)

    @property
    def needs_reload(self) -> bool:
        return self.loaded_query != self.query


# ==================== LOAD TRANSITIONS ====================

def begin_load(state: CatalogState) -> int:
    """Mark a list request as in flight and return its sequence number."""
    state.request_seq += 1
    state.loading = True
    state.error = None
    return state.request_seq


def finish_load(state: CatalogState, seq: int, movies: list[Movie]) -> bool:
    """
    Replace the list with a server response.

    Returns False (and changes nothing) if a newer request was issued
    after the one identified by `seq`.
    """
    if seq != state.request_seq:
        return False
    state.movies = list(movies)
    state.loading = False
    state.loaded_query = state.query
    return True


def fail_load(state: CatalogState, seq: int, message: str) -> bool:
    """Record a failed list request unless it has been superseded."""
    if seq != state.request_seq:
        return False
    state.error = message
    state.loading = False
    state.loaded_query = state.query
    return True


def invalidate(state: CatalogState) -> None:
    """Force the next render to reload the list."""
    state.loaded_query = None


# ==================== QUERY TRANSITIONS ====================

def set_search(state: CatalogState, search: str) -> None:
    state.search = search


def set_sort(state: CatalogState, sort: SortOrder | str) -> None:
    state.sort = SortOrder(sort)


# ==================== FORM TRANSITIONS ====================

def open_create_form(state: CatalogState) -> None:
    state.editing = None
    state.form_mode = FormMode.CREATE


def open_edit_form(state: CatalogState, movie: Movie) -> None:
    state.editing = movie
    state.form_mode = FormMode.EDIT


def close_form(state: CatalogState) -> None:
    state.editing = None
    state.form_mode = FormMode.NONE


# ==================== DELETE / ERROR TRANSITIONS ====================

def request_delete(state: CatalogState, movie: Movie) -> None:
    """Ask for confirmation before deleting `movie`."""
    state.pending_delete = movie


def cancel_delete(state: CatalogState) -> None:
    state.pending_delete = None


def set_error(state: CatalogState, message: str) -> None:
    state.error = message


def dismiss_error(state: CatalogState) -> None:
    state.error = None


# ==================== STREAMLIT BINDING ====================

def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = CatalogState()


def get_catalog_state() -> CatalogState:
    """Get the page view model for the current session."""
    init_session_state()
    return st.session_state[STATE_KEY]
