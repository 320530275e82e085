"""
Recipe page components.

Draws the search form, the card grid and the detail panel from
finder.view objects. Button clicks go through the callbacks in utils.state.
"""

from html import escape

import streamlit as st

from finder.view import PageView, RecipeCard, RecipeDetail, nutrient_table
from ui.layout import pill_tag
from utils.state import SEARCH_INPUT_KEY, on_close_detail, on_search_submit, on_select_recipe

GRID_COLUMNS = 3


def render_search_form(view: PageView) -> None:
    """Search box and button; submitting commits the query."""
    with st.form("recipe_search_form", clear_on_submit=False):
        col_input, col_button = st.columns([4, 1])
        with col_input:
            st.text_input(
                "Search recipes",
                value=view.draft_text,
                key=SEARCH_INPUT_KEY,
                placeholder="Search for recipes... (e.g., pasta, chicken, vegetables)",
                label_visibility="collapsed",
            )
        with col_button:
            st.form_submit_button("🔍 Search", on_click=on_search_submit, use_container_width=True)


def render_card(card: RecipeCard) -> None:
    with st.container(border=True):
        if card.image:
            st.image(card.image, use_container_width=True)
        st.markdown(f'<div class="rf-card-title">{escape(card.title)}</div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="rf-card-meta">🕒 {card.time_text} · 👥 {card.servings_text} · 🔥 {card.calories_text}</div>',
            unsafe_allow_html=True,
        )
        if card.diet_labels:
            st.markdown("".join(pill_tag(label) for label in card.diet_labels), unsafe_allow_html=True)

        col_details, col_link = st.columns(2)
        with col_details:
            st.button(
                "View Details",
                key=f"details_{card.recipe_id}",
                on_click=on_select_recipe,
                args=(card.recipe_id,),
                use_container_width=True,
                type="primary",
            )
        with col_link:
            if card.url:
                st.link_button("Full Recipe →", card.url, use_container_width=True)


def render_card_grid(view: PageView) -> None:
    for start in range(0, len(view.cards), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS, gap="medium")
        for column, card in zip(columns, view.cards[start:start + GRID_COLUMNS]):
            with column:
                render_card(card)


def render_recipe_detail(detail: RecipeDetail) -> None:
    """Detail panel for the selected recipe, built from the fetched record."""
    with st.container(border=True):
        col_image, col_summary = st.columns([1, 2])
        with col_image:
            if detail.image:
                st.image(detail.image, use_container_width=True)
        with col_summary:
            st.markdown(f"## {detail.title}")
            if detail.source:
                st.caption(f"by {detail.source}")
            stat_cols = st.columns(4)
            stat_cols[0].metric("Calories / serving", detail.calories_per_serving)
            stat_cols[1].metric("Time", detail.time_text)
            stat_cols[2].metric("Meal", detail.meal_type_text)
            stat_cols[3].metric("Servings", detail.servings_text)

        if detail.diet_labels or detail.health_labels:
            st.markdown("### Dietary Information")
            pills = [pill_tag(label) for label in detail.diet_labels]
            pills += [pill_tag(label, "health") for label in detail.health_labels]
            if detail.more_health_labels:
                pills.append(pill_tag(f"+{detail.more_health_labels} more", "muted"))
            st.markdown("".join(pills), unsafe_allow_html=True)

        col_ingredients, col_nutrition = st.columns(2)
        with col_ingredients:
            st.markdown("### Ingredients")
            if detail.ingredients:
                st.markdown("\n".join(f"- {line}" for line in detail.ingredients))
            else:
                st.caption("No ingredient list available.")
        with col_nutrition:
            if detail.nutrients:
                st.markdown("### Nutrition (per serving)")
                st.dataframe(nutrient_table(detail), hide_index=True, use_container_width=True)

        col_link, col_close = st.columns([3, 1])
        with col_link:
            if detail.url:
                st.link_button(f"{detail.link_text} →", detail.url, use_container_width=True, type="primary")
        with col_close:
            st.button("Close", key="close_detail", on_click=on_close_detail, use_container_width=True)
