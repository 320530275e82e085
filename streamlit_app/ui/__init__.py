"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Recipe Finder Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, pill_tag, render_footer

__all__ = [
    "load_global_styles",
    "page_header",
    "pill_tag",
    "render_footer",
]
