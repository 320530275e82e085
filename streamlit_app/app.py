"""
Recipe Finder - Streamlit Frontend Main Entry Point.

This is the Streamlit application entry point. It sets up the page configuration,
keeps the search store in session state, resolves the pending fetch while a
spinner is shown, and draws whatever finder.view.build_view() describes.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import finder
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from finder.config import configure_logging, get_default_query

import streamlit as st

from finder.view import Screen, build_view
from utils.state import get_cycle, init_search_state
from ui.styles import load_global_styles
from ui.layout import page_header, render_footer
from ui.feedback import show_empty_state, show_error, working_spinner
from ui.recipes import render_card_grid, render_recipe_detail, render_search_form

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Finder",
    page_icon="🍳",
    layout="wide",
)

load_global_styles()

init_search_state(get_default_query())
cycle = get_cycle()

page_header(
    "Recipe Finder",
    subtitle="Discover amazing recipes from around the world. Search for your favorite "
             "ingredients and find culinary inspiration!",
)

view = build_view(cycle.holder.store)
render_search_form(view)

if view.screen is Screen.LOADING:
    with working_spinner(view.loading_message):
        cycle.resolve_pending()
    st.rerun()

if view.screen is Screen.ERROR:
    show_error(view.error_message or "Unknown error", hint="Submit the search again to retry.")

elif view.screen is Screen.EMPTY:
    st.markdown(f"## {view.heading}")
    show_empty_state(view.empty_title, view.empty_hint)

elif view.screen is Screen.GRID:
    st.markdown(f"## {view.heading}")
    if view.detail is not None:
        render_recipe_detail(view.detail)
    render_card_grid(view)

render_footer()
