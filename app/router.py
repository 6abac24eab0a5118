"""
Mode page router for the Streamlit app.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.ui.conjugation_panel import render_conjugation_panel
from app.ui.typing_panel import render_typing_panel
from core.constants import Mode


@dataclass(frozen=True)
class ModePage:
    mode: Mode
    title: str
    description: str
    render: Callable[[], None]


MODE_PAGES = [
    ModePage(
        mode=Mode.TYPING,
        title="Typing",
        description="Type each word as fast as you can",
        render=render_typing_panel,
    ),
    ModePage(
        mode=Mode.CONJUGATION,
        title="Conjugation",
        description="Fill in the full conjugation table of a verb",
        render=render_conjugation_panel,
    ),
]


def get_mode_page(mode: Mode) -> ModePage:
    return next(page for page in MODE_PAGES if page.mode == mode)
