"""
Search State Management Module.

This module wraps Streamlit's session_state to hold one QueryStateHolder and
its FetchCycle per browser session. Widgets never touch the store directly:
callbacks here translate widget events into state-holder calls.

# NOTE: This module uses session_state, so the search state persists only for
    the current Streamlit session. Refreshing the page starts over with the
    default query.
"""

import streamlit as st

from finder.connectors.edamam_connector import EdamamConnector
from finder.cycle import FetchCycle
from finder.state import QueryStateHolder

# Session state keys
CYCLE_KEY = "fetch_cycle"
SEARCH_INPUT_KEY = "recipe_search_input"


def init_search_state(default_query: str) -> None:
    """
    Create the state holder and fetch cycle on first run and commit the default query.

    Call this at the top of the page; later reruns are a no-op.
    """
    if CYCLE_KEY not in st.session_state:
        cycle = FetchCycle(QueryStateHolder(), EdamamConnector)
        cycle.mount(default_query)
        st.session_state[CYCLE_KEY] = cycle


def get_cycle() -> FetchCycle:
    return st.session_state[CYCLE_KEY]


def get_holder() -> QueryStateHolder:
    return get_cycle().holder


def on_search_submit() -> None:
    """Form submit callback: copy the input into the draft and commit it."""
    holder = get_holder()
    holder.set_draft_text(st.session_state.get(SEARCH_INPUT_KEY, ""))
    holder.commit_query()


def on_select_recipe(recipe_id: str) -> None:
    get_holder().select_recipe(recipe_id)


def on_close_detail() -> None:
    get_holder().select_recipe(None)
