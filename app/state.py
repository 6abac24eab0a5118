"""
Streamlit session state and dataset initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core.config import settings
from core.dataset import Dataset, load_dataset
from core.mode_controller import ModeController


@st.cache_resource
def get_dataset() -> Dataset:
    """
    Load the datasets once per server process.
    """
    return load_dataset(settings)


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.

    Each browser session owns exactly one controller.
    """
    if "controller" not in st.session_state:
        st.session_state.controller = ModeController(
            get_dataset(),
            round_size=settings.ROUND_SIZE,
            tick_interval=settings.tick_interval_seconds,
        )
    if "typed_word" not in st.session_state:
        st.session_state.typed_word = ""
    if "typing_flash" not in st.session_state:
        st.session_state.typing_flash = False
    if "grid_generation" not in st.session_state:
        st.session_state.grid_generation = 0
    if "last_error" not in st.session_state:
        st.session_state.last_error = None


def get_controller() -> ModeController:
    return st.session_state.controller
