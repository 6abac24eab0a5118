"""
Prompt Card UI Component

Renders the current word or verb as a large centered card.
"""

from __future__ import annotations

import html

import streamlit as st

CARD_PADDING = "30px 24px"
CARD_MIN_HEIGHT = "140px"
DEFAULT_BG_COLOR = "#f0f2f6"
DEFAULT_MAIN_COLOR = "#1f1f1f"
ERROR_MAIN_COLOR = "#d9534f"


def render_prompt_card(
    main_text: str,
    subtitle: str = "",
    main_font_size: str = "2.6em",
    main_color: str = DEFAULT_MAIN_COLOR,
    bg_color: str = DEFAULT_BG_COLOR,
) -> None:
    """
    Render a prompt card.

    Args:
        main_text: Word or verb to show (escaped before rendering)
        subtitle: Optional hint below the main text
        main_font_size: CSS font size for main text
        main_color: CSS color for main text, red for the mismatch flash
        bg_color: Background color of card
    """
    main_html = (
        f'<h1 style="font-size: {main_font_size}; color: {main_color}; '
        'font-weight: normal; margin: 0; text-align: center; line-height: 1.4; '
        f'overflow-wrap: anywhere;">{html.escape(main_text)}</h1>'
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            '<p style="font-size: 1.0em; color: #666; font-style: italic; '
            f'margin: 12px 0 0 0; text-align: center;">{html.escape(subtitle)}</p>'
        )

    card_html = (
        f'<div style="background-color: {bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); '
        f'min-height: {CARD_MIN_HEIGHT}; display: flex; flex-direction: column; '
        f'align-items: center; justify-content: center;">{main_html}{subtitle_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)
