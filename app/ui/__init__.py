"""UI Components for the trainer"""

from app.ui.prompt_card import render_prompt_card
from app.ui.session_stats import render_session_stats, render_session_complete

__all__ = [
    "render_prompt_card",
    "render_session_stats",
    "render_session_complete",
]
