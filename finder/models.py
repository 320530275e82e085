"""
Recipe models for the finder system.

This module defines the canonical recipe schemas used throughout the app.
The Edamam connector parses raw JSON responses into these models, and the
view layer only ever reads them.

# NOTE: Recipe is a read-only record. It mirrors the provider's camelCase field
    names through aliases (totalTime, ingredientLines, ...) so a raw hit can be
    validated directly, while the rest of the code uses snake_case attributes.

Field expectations from the Edamam v2 response:
- hits[].recipe: label, image, source, url, uri, yield, calories, totalTime,
  mealType, dietLabels, healthLabels, ingredientLines, ingredients, totalNutrients
- Every field except label may be missing or null; unknown fields are ignored.
"""

import math
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Servings assumed when the provider omits yield (or reports 0)
DEFAULT_SERVINGS = 4


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


class Nutrient(BaseModel):
    """A single nutrient total for the whole recipe."""
    label: str = Field("", description="Display label (e.g., 'Protein')")
    quantity: float = Field(0.0, description="Total quantity for the whole recipe")
    unit: str = Field("", description="Unit (g, mg, kcal)")

    model_config = ConfigDict(extra="ignore", frozen=True)


class Ingredient(BaseModel):
    """Structured ingredient entry; only the free-text line is used for display."""
    text: str = Field("", description="Ingredient line as written in the recipe")
    food: Optional[str] = Field(None, description="Normalized food name")
    quantity: Optional[float] = Field(None, description="Parsed quantity")
    measure: Optional[str] = Field(None, description="Parsed measure")
    weight: Optional[float] = Field(None, description="Weight in grams")
    image: Optional[str] = Field(None, description="Ingredient image URL")

    model_config = ConfigDict(extra="ignore", frozen=True)


class Recipe(BaseModel):
    """
    Recipe record retrieved verbatim from the search API.

    This is the stable contract the view layer relies on. Instances are
    frozen: the app never mutates a fetched recipe.
    """
    # Identity and links
    uri: Optional[str] = Field(None, description="Provider URI, used as a stable recipe id")
    label: str = Field(..., description="Recipe title")
    image: str = Field("", description="URL to recipe image")
    source: str = Field("", description="Publisher name")
    url: str = Field("", description="URL to full recipe on the publisher's site")

    # Quantities
    recipe_yield: Optional[float] = Field(None, alias="yield", description="Number of servings")
    calories: float = Field(0.0, description="Total calories for the whole recipe")
    total_time: Optional[float] = Field(None, alias="totalTime", description="Total time in minutes")

    # Labels
    meal_type: List[str] = Field(default_factory=list, alias="mealType")
    diet_labels: List[str] = Field(default_factory=list, alias="dietLabels")
    health_labels: List[str] = Field(default_factory=list, alias="healthLabels")

    # Ingredients and nutrition
    ingredient_lines: List[str] = Field(default_factory=list, alias="ingredientLines")
    ingredients: List[Ingredient] = Field(default_factory=list)
    total_nutrients: Dict[str, Nutrient] = Field(default_factory=dict, alias="totalNutrients")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @field_validator(
        "meal_type", "diet_labels", "health_labels", "ingredient_lines",
        "ingredients", "total_nutrients", mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value, info):
        """The provider sends null for empty collections on some records."""
        if value is None:
            return {} if info.field_name == "total_nutrients" else []
        return value

    @field_validator("image", "source", "url", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value

    @field_validator("calories", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return 0.0 if value is None else value

    @property
    def servings(self) -> float:
        """Yield, or DEFAULT_SERVINGS when the provider reports none."""
        return self.recipe_yield or DEFAULT_SERVINGS

    @property
    def calories_per_serving(self) -> int:
        return round_half_up(self.calories / self.servings)

    @property
    def nutrients(self) -> Dict[str, Nutrient]:
        """Nutrient totals keyed by provider code (ENERC_KCAL, PROCNT, ...)."""
        return self.total_nutrients

    @property
    def labels(self) -> List[str]:
        """Diet labels followed by health labels."""
        return [*self.diet_labels, *self.health_labels]

    @property
    def ingredient_texts(self) -> List[str]:
        """
        Ingredient lines for display.

        Prefers ingredientLines; older API versions only send structured
        ingredients, in which case their text is used.
        """
        if self.ingredient_lines:
            return list(self.ingredient_lines)
        return [ingredient.text for ingredient in self.ingredients if ingredient.text]


class RecipeHit(BaseModel):
    """One search result, wrapping a recipe."""
    recipe: Recipe

    model_config = ConfigDict(extra="ignore", frozen=True)


class SearchResponse(BaseModel):
    """
    Top-level search response.

    Paging fields (from, to, count, _links) are ignored: only the first page
    of hits is ever requested.
    """
    hits: List[RecipeHit]

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def recipes(self) -> List[Recipe]:
        return [hit.recipe for hit in self.hits]
