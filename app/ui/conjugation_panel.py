"""
Conjugation grid panel.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_controller
from app.ui.prompt_card import render_prompt_card
from core.constants import SessionState
from core.sessions import field_name
from core.snapshots import ConjugationSnapshot, GradeResult

MAX_CORRECTIONS_SHOWN = 3


def _input_key(person: str, form: str) -> str:
    return f"conj_{st.session_state.grid_generation}_{field_name(person, form)}"


def _render_grid_form(snapshot: ConjugationSnapshot) -> None:
    with st.form(f"conj_form_{st.session_state.grid_generation}"):
        header = st.columns(len(snapshot.forms) + 1)
        header[0].markdown("**Person**")
        for col, form in zip(header[1:], snapshot.forms):
            col.markdown(f"**{form}**")

        for person in snapshot.persons:
            row = st.columns(len(snapshot.forms) + 1)
            row[0].markdown(f"**{person}**")
            for col, form in zip(row[1:], snapshot.forms):
                col.text_input(
                    f"{person} {form}",
                    key=_input_key(person, form),
                    placeholder="...",
                    label_visibility="collapsed",
                )

        submitted = st.form_submit_button("✔ Check Answers")

    if submitted:
        answers = {
            (person, form): st.session_state.get(_input_key(person, form), "")
            for person, form in snapshot.cells
        }
        get_controller().submit_conjugation_grid(answers)
        st.rerun()


def _render_result(result: GradeResult) -> None:
    if result.perfect:
        st.success("🎉 Perfect! All answers correct!")
        return

    corrections = ", ".join(
        f'{m.person} {m.form}: "{m.expected}"'
        for m in result.mistakes[:MAX_CORRECTIONS_SHOWN]
    )
    more = "..." if len(result.mistakes) > MAX_CORRECTIONS_SHOWN else ""
    st.error(f"❌ {result.error_count} error(s)  \nCorrections: {corrections}{more}")


def render_conjugation_panel() -> None:
    """
    Render the verb prompt, answer grid and grading result.
    """
    snapshot = get_controller().conjugation.snapshot()

    if snapshot.state == SessionState.IDLE:
        render_prompt_card("Select a verb to conjugate", main_font_size="1.8em")
        return

    render_prompt_card(snapshot.verb)
    _render_grid_form(snapshot)

    if snapshot.result is not None:
        _render_result(snapshot.result)
