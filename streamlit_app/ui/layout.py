"""
Layout primitives for consistent page structure.

Provides reusable components for the page header, label pills and the footer.
"""

from html import escape
from typing import Optional

import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render the page header banner with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    subtitle_html = f'<div class="subtitle">{escape(subtitle)}</div>' if subtitle else ""
    st.markdown(
        f'<div class="rf-page-header"><h1>{escape(title)}</h1>{subtitle_html}</div>',
        unsafe_allow_html=True,
    )


def pill_tag(text: str, variant: Optional[str] = None) -> str:
    """
    Build HTML for a small label pill.

    Args:
        text: Label text
        variant: Optional style variant ("health" or "muted")

    Returns:
        HTML string to pass to st.markdown(..., unsafe_allow_html=True)
    """
    css_class = "pill-tag" if variant is None else f"pill-tag pill-tag--{variant}"
    return f'<span class="{css_class}">{escape(text)}</span>'


def render_footer() -> None:
    st.markdown(
        '<div class="rf-footer">Powered by Edamam Recipe API • Find your next favorite dish</div>',
        unsafe_allow_html=True,
    )
