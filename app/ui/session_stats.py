"""
Session Statistics UI

Renders typing progress metrics and the final result.
"""

import streamlit as st

from core.snapshots import TypingResult, TypingSnapshot


def render_session_stats(snapshot: TypingSnapshot, elapsed: float, wpm: int) -> None:
    """Render timer, progress and speed metrics in one row."""
    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric("⏱ Time", f"{elapsed:.2f}s")

    with col2:
        current, total = snapshot.progress
        st.metric("📊 Progress", f"{current} / {total}")

    with col3:
        st.metric("💨 Speed", f"{wpm} WPM")


def render_session_complete(result: TypingResult) -> None:
    """Render round completion message."""
    st.success(
        f"🎉 Complete! ✅ Time: {result.elapsed_seconds:.2f}s · "
        f"🚀 Speed: {result.wpm} WPM · 🎯 Accuracy: {result.accuracy}%"
    )
