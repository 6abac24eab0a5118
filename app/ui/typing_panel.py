"""
Typing drill panel.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_controller
from app.ui.prompt_card import DEFAULT_MAIN_COLOR, ERROR_MAIN_COLOR, render_prompt_card
from app.ui.session_stats import render_session_complete, render_session_stats
from core.config import settings
from core.constants import SessionState, SubmitOutcome


def _on_word_submitted() -> None:
    controller = get_controller()
    typed = st.session_state.typed_word
    result = controller.submit_typed_word(typed)

    if result.matched:
        st.session_state.typed_word = ""
        st.session_state.typing_flash = False
    elif result.outcome == SubmitOutcome.NO_MATCH:
        st.session_state.typing_flash = controller.typing.is_mismatch(typed)


@st.fragment(run_every=settings.tick_interval_seconds)
def _render_live_stats() -> None:
    controller = get_controller()
    tick = controller.tick()
    snapshot = controller.typing.snapshot()
    if tick is None:
        render_session_stats(snapshot, snapshot.elapsed_seconds, snapshot.wpm)
    else:
        render_session_stats(snapshot, tick.elapsed_seconds, tick.wpm)


def render_typing_panel() -> None:
    """
    Render the prompt, input box and metrics for the typing drill.
    """
    snapshot = get_controller().typing.snapshot()
    running = snapshot.state == SessionState.RUNNING

    if running:
        color = ERROR_MAIN_COLOR if st.session_state.typing_flash else DEFAULT_MAIN_COLOR
        render_prompt_card(snapshot.current_word, main_color=color)
        st.session_state.typing_flash = False
    elif snapshot.state == SessionState.FINISHED:
        render_prompt_card("🎉 Complete!")
    else:
        render_prompt_card("Press Start to begin!", main_font_size="1.8em")

    st.text_input(
        "Type the word and press Enter",
        key="typed_word",
        on_change=_on_word_submitted,
        disabled=not running,
        autocomplete="off",
    )

    if running:
        _render_live_stats()
    else:
        render_session_stats(snapshot, snapshot.elapsed_seconds, snapshot.wpm)

    if snapshot.result is not None:
        render_session_complete(snapshot.result)
