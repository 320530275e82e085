"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides the components the recipe page uses for its Failure, empty-result and
Loading screens.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"😞 Oops! An error occurred: {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"🍽️ **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Discovering delicious recipes..."):
            cycle.resolve_pending()

    Args:
        label: Spinner label text (default: "Working…")
    """
    with st.spinner(label):
        yield
