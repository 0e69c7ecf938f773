"""
Streamlit main app for the Movie Catalog Manager.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from app.config import get_api_base_url
from app.ui.components.movie_card import render_movie_card
from app.ui.components.movie_form import render_movie_form
from app.ui.utils.catalog import (
    delete_movie,
    empty_message,
    refresh_if_needed,
    save_movie,
    start_edit,
)
from app.ui.utils.session_state import (
    FormMode,
    SortOrder,
    cancel_delete,
    close_form,
    dismiss_error,
    get_catalog_state,
    invalidate,
    open_create_form,
    request_delete,
    set_search,
    set_sort,
)
from app.utils.logging_config import setup_logging

GRID_COLUMNS = 3


@st.cache_resource
def _configure_logging() -> bool:
    setup_logging()
    return True


st.set_page_config(
    page_title="Movie Management",
    page_icon="🎬",
    layout="wide",
)

_configure_logging()
state = get_catalog_state()

st.title("🎬 Movie Management")
st.markdown("Manage your movies with ease")
st.caption(f"Backend: {get_api_base_url()}")

# Controls
col1, col2, col3, col4 = st.columns([3, 1, 1, 1], vertical_alignment="bottom")
with col1:
    search = st.text_input(
        "Search",
        key="search_input",
        placeholder="Search movies...",
        label_visibility="collapsed",
    )
    set_search(state, search)
with col2:
    sort = st.selectbox(
        "Sort",
        options=[SortOrder.ASC.value, SortOrder.DESC.value],
        format_func=lambda x: "Sort A-Z" if x == SortOrder.ASC.value else "Sort Z-A",
        key="sort_input",
        label_visibility="collapsed",
    )
    set_sort(state, sort)
with col3:
    if st.button("+ Create Movie", key="create_movie"):
        open_create_form(state)
        st.rerun()
with col4:
    if st.button("🔄 Refresh", key="refresh"):
        invalidate(state)
        st.rerun()

with st.spinner("Loading movies..."):
    refresh_if_needed(state)

# Error message
if state.error:
    err_col, dismiss_col = st.columns([6, 1], vertical_alignment="center")
    with err_col:
        st.error(state.error)
    with dismiss_col:
        if st.button("Dismiss", key="dismiss_error"):
            dismiss_error(state)
            st.rerun()

# Form
if state.form_mode != FormMode.NONE:
    with st.container(border=True):
        render_movie_form(
            state.editing if state.form_mode == FormMode.EDIT else None,
            on_submit=lambda dto: save_movie(state, dto),
            on_cancel=lambda: close_form(state),
        )

st.divider()

# Movies grid
if state.loading:
    st.info("Loading movies...")
elif not state.movies:
    st.info(empty_message(state))
else:
    columns = st.columns(GRID_COLUMNS)
    for i, movie in enumerate(state.movies):
        with columns[i % GRID_COLUMNS]:
            render_movie_card(
                movie,
                on_edit=lambda m: start_edit(state, m),
                on_delete=lambda movie_id: delete_movie(state, movie_id),
                on_request_delete=lambda m: request_delete(state, m),
                on_cancel_delete=lambda: cancel_delete(state),
                confirming_delete=(
                    state.pending_delete is not None and state.pending_delete.id == movie.id
                ),
            )
