"""
Typing & Conjugation Trainer - Main App

Thin Streamlit shell: reads controller snapshots and forwards user actions
to the controller's command surface.

Run with:
    streamlit run app/streamlit_app.py
"""

import logging

import streamlit as st

from app.logging_setup import setup_logging
from app.router import MODE_PAGES, get_mode_page
from app.state import ensure_session_state, get_controller, get_dataset
from core.errors import TrainerError

logger = logging.getLogger("app.streamlit_app")


# ---- Page Setup ----

st.set_page_config(
    page_title="Typing & Conjugation Trainer",
    page_icon="⌨️",
    layout="centered"
)

setup_logging()
ensure_session_state()


# ---- Commands ----

def _on_mode_changed() -> None:
    title = st.session_state.mode_choice
    page = next(page for page in MODE_PAGES if page.title == title)
    get_controller().select_mode(page.mode)
    st.session_state.typed_word = ""
    st.session_state.last_error = None


def _on_start_clicked() -> None:
    st.session_state.typed_word = ""
    st.session_state.typing_flash = False
    st.session_state.grid_generation += 1
    try:
        get_controller().start()
        st.session_state.last_error = None
    except TrainerError as exc:
        logger.error("Could not start round: %s", exc)
        st.session_state.last_error = str(exc)


# ---- Layout ----

st.title("⌨️ Typing & Conjugation Trainer")

dataset = get_dataset()
if not dataset.is_ready:
    st.warning("⚠️ Some data could not be loaded. Check the data directory and the log file.")

controller = get_controller()
active_page = get_mode_page(controller.mode)

col_mode, col_start = st.columns([3, 1])
with col_mode:
    st.selectbox(
        "Mode",
        [page.title for page in MODE_PAGES],
        index=MODE_PAGES.index(active_page),
        key="mode_choice",
        on_change=_on_mode_changed,
        help=active_page.description,
    )
with col_start:
    st.markdown("<br>", unsafe_allow_html=True)  # Align with selectbox
    st.button("▶ Start", type="primary", use_container_width=True, on_click=_on_start_clicked)

if st.session_state.last_error:
    st.error(f"❌ Error: {st.session_state.last_error}")

st.divider()
active_page.render()
