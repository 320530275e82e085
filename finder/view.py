"""
Pure view model for the recipe page.

build_view() turns a RecipeStore into a PageView describing exactly what the
page shows. It has no UI dependencies; streamlit_app only draws the result.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import pandas as pd

from finder.models import Recipe, round_half_up
from finder.state import FetchPhase, RecipeStore, recipe_id_for

LOADING_MESSAGE = "Discovering delicious recipes..."
EMPTY_TITLE = "No recipes found"
EMPTY_HINT = 'Try searching for different ingredients or popular dishes like "pasta", "chicken", or "salad"'

CARD_DIET_LABEL_LIMIT = 2
DETAIL_HEALTH_LABEL_LIMIT = 8

# (provider code, display label, unit) in display order
NUTRIENT_ROWS: Tuple[Tuple[str, str, str], ...] = (
    ("ENERC_KCAL", "Calories", "kcal"),
    ("PROCNT", "Protein", "g"),
    ("FAT", "Fat", "g"),
    ("CHOCDF", "Carbs", "g"),
    ("FIBTG", "Fiber", "g"),
    ("NA", "Sodium", "mg"),
)


class Screen(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    GRID = "grid"


@dataclass(frozen=True)
class RecipeCard:
    recipe_id: str
    title: str
    image: str
    url: str
    time_text: str
    servings_text: str
    calories_text: str
    diet_labels: Tuple[str, ...] = ()


@dataclass(frozen=True)
class NutrientRow:
    label: str
    amount: int
    unit: str


@dataclass(frozen=True)
class RecipeDetail:
    recipe_id: str
    title: str
    image: str
    source: str
    url: str
    link_text: str
    calories_per_serving: int
    time_text: str
    meal_type_text: str
    servings_text: str
    diet_labels: Tuple[str, ...] = ()
    health_labels: Tuple[str, ...] = ()
    more_health_labels: int = 0
    ingredients: Tuple[str, ...] = ()
    nutrients: Tuple[NutrientRow, ...] = ()


@dataclass(frozen=True)
class PageView:
    """
    Everything needed to draw the page.

    Only one of loading_message / error_message / empty_* / cards is relevant,
    depending on screen. detail is set only on the GRID screen.
    """
    screen: Screen
    draft_text: str
    heading: str
    loading_message: str = LOADING_MESSAGE
    error_message: Optional[str] = None
    empty_title: str = EMPTY_TITLE
    empty_hint: str = EMPTY_HINT
    cards: Tuple[RecipeCard, ...] = field(default_factory=tuple)
    detail: Optional[RecipeDetail] = None


def _format_number(value: float) -> str:
    return f"{value:g}"


def time_text(recipe: Recipe) -> str:
    if recipe.total_time:
        return f"{_format_number(recipe.total_time)} min"
    return "Quick"


def results_heading(query: str) -> str:
    """'pasta' -> 'Pasta Recipes'."""
    return f"{query[:1].upper()}{query[1:]} Recipes".strip()


def build_card(recipe: Recipe, position: int) -> RecipeCard:
    return RecipeCard(
        recipe_id=recipe_id_for(recipe, position),
        title=recipe.label,
        image=recipe.image,
        url=recipe.url,
        time_text=time_text(recipe),
        servings_text=f"{_format_number(recipe.servings)} servings",
        calories_text=f"{recipe.calories_per_serving} cal",
        diet_labels=tuple(recipe.diet_labels[:CARD_DIET_LABEL_LIMIT]),
    )


def nutrient_rows(recipe: Recipe) -> Tuple[NutrientRow, ...]:
    """Per-serving amounts for the known nutrients, skipping any the recipe lacks."""
    rows = []
    for code, label, unit in NUTRIENT_ROWS:
        nutrient = recipe.nutrients.get(code)
        if nutrient is None:
            continue
        rows.append(NutrientRow(label=label, amount=round_half_up(nutrient.quantity / recipe.servings), unit=unit))
    return tuple(rows)


def build_detail(recipe: Recipe, position: int) -> RecipeDetail:
    health_labels = [label.replace("-", " ") for label in recipe.health_labels]
    return RecipeDetail(
        recipe_id=recipe_id_for(recipe, position),
        title=recipe.label,
        image=recipe.image,
        source=recipe.source,
        url=recipe.url,
        link_text=f"View Full Recipe on {recipe.source}",
        calories_per_serving=recipe.calories_per_serving,
        time_text=time_text(recipe),
        meal_type_text=recipe.meal_type[0] if recipe.meal_type else "Any time",
        servings_text=_format_number(recipe.servings),
        diet_labels=tuple(recipe.diet_labels),
        health_labels=tuple(health_labels[:DETAIL_HEALTH_LABEL_LIMIT]),
        more_health_labels=max(len(health_labels) - DETAIL_HEALTH_LABEL_LIMIT, 0),
        ingredients=tuple(recipe.ingredient_texts),
        nutrients=nutrient_rows(recipe),
    )


def find_selected(recipes: Tuple[Recipe, ...], recipe_id: Optional[str]) -> Optional[RecipeDetail]:
    if recipe_id is None:
        return None
    for position, recipe in enumerate(recipes):
        if recipe_id_for(recipe, position) == recipe_id:
            return build_detail(recipe, position)
    return None


def build_view(store: RecipeStore) -> PageView:
    """
    Build the page view for the current store.

    Args:
        store: Current RecipeStore

    Returns:
        PageView. Loading and error screens carry no cards, so results from
        an earlier search are never shown alongside them.
    """
    search = store.search
    status = store.status
    heading = results_heading(search.committed_query)

    if status.phase is FetchPhase.IDLE:
        return PageView(screen=Screen.IDLE, draft_text=search.draft_text, heading=heading)

    if status.phase is FetchPhase.LOADING:
        return PageView(screen=Screen.LOADING, draft_text=search.draft_text, heading=heading)

    if status.phase is FetchPhase.FAILURE:
        return PageView(
            screen=Screen.ERROR,
            draft_text=search.draft_text,
            heading=heading,
            error_message=status.error,
        )

    if not status.recipes:
        return PageView(screen=Screen.EMPTY, draft_text=search.draft_text, heading=heading)

    cards = tuple(build_card(recipe, position) for position, recipe in enumerate(status.recipes))
    return PageView(
        screen=Screen.GRID,
        draft_text=search.draft_text,
        heading=heading,
        cards=cards,
        detail=find_selected(status.recipes, search.selected_recipe_id),
    )


def nutrient_table(detail: RecipeDetail) -> pd.DataFrame:
    """Nutrient rows as a DataFrame with Nutrient / Per serving / Unit columns."""
    return pd.DataFrame(
        [{"Nutrient": row.label, "Per serving": row.amount, "Unit": row.unit} for row in detail.nutrients],
        columns=["Nutrient", "Per serving", "Unit"],
    )
