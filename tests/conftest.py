"""
Shared fixtures: Edamam-shaped payloads and a fake connector.

No test here talks to the network; connector tests patch requests.get.
"""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from finder.connectors.base import BaseRecipeConnector
from finder.models import Recipe


def make_recipe_payload(label: str, **overrides: Any) -> Dict[str, Any]:
    """Raw recipe dict as Edamam returns it (camelCase keys)."""
    payload = {
        "uri": f"http://www.edamam.com/ontologies/edamam.owl#recipe_{label.lower().replace(' ', '_')}",
        "label": label,
        "image": f"https://img.example.com/{label.lower().replace(' ', '-')}.jpg",
        "source": "Food Network",
        "url": f"https://www.example.com/{label.lower().replace(' ', '-')}",
        "yield": 4.0,
        "dietLabels": ["Balanced", "High-Fiber", "Low-Sodium"],
        "healthLabels": ["Vegetarian", "Pescatarian", "Egg-Free"],
        "ingredientLines": ["200g spaghetti", "2 cloves garlic"],
        "ingredients": [{"text": "200g spaghetti", "food": "spaghetti", "weight": 200.0}],
        "calories": 1800.0,
        "totalTime": 25.0,
        "mealType": ["lunch/dinner"],
        "totalNutrients": {
            "ENERC_KCAL": {"label": "Energy", "quantity": 1800.0, "unit": "kcal"},
            "PROCNT": {"label": "Protein", "quantity": 62.0, "unit": "g"},
            "FAT": {"label": "Fat", "quantity": 40.0, "unit": "g"},
            "NA": {"label": "Sodium", "quantity": 1210.0, "unit": "mg"},
        },
    }
    payload.update(overrides)
    return payload


def make_search_payload(*recipes: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "from": 1,
        "to": len(recipes),
        "count": len(recipes),
        "_links": {},
        "hits": [{"recipe": recipe, "_links": {}} for recipe in recipes],
    }


def make_response(status_code: int, payload: Optional[Any] = None, body: Optional[bytes] = None) -> requests.Response:
    """A real requests.Response so raise_for_status() and json() behave normally."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://api.edamam.com/api/recipes/v2"
    response.reason = "OK" if status_code < 400 else "Error"
    if body is not None:
        response._content = body
    else:
        response._content = json.dumps(payload if payload is not None else {}).encode("utf-8")
    response.encoding = "utf-8"
    return response


def recipe(label: str, **overrides: Any) -> Recipe:
    return Recipe.model_validate(make_recipe_payload(label, **overrides))


class FakeConnector(BaseRecipeConnector):
    """Connector returning canned results per query, or raising a given error."""
    provider = "fake"

    def __init__(self, results: Optional[Dict[str, List[Recipe]]] = None, error: Optional[Exception] = None) -> None:
        self.results = results or {}
        self.error = error
        self.queries: List[str] = []

    def search_recipes(self, query: str) -> List[Recipe]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.results.get(query, [])


@pytest.fixture
def pasta_recipes() -> List[Recipe]:
    return [recipe("Pasta Carbonara"), recipe("Pasta Primavera", calories=1200.0, **{"yield": 2.0})]


@pytest.fixture
def pasta_payload() -> Dict[str, Any]:
    return make_search_payload(make_recipe_payload("Pasta Carbonara"), make_recipe_payload("Pasta Primavera"))
