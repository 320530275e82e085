"""
Base connector abstract class for recipe search providers.

This module defines the abstract base class that recipe connectors must implement.
It keeps the fetch cycle independent of any one provider's API, and lets tests
substitute a fake connector.

All connectors must:
- Implement the provider attribute (e.g., "edamam")
- Provide a search_recipes method that returns parsed Recipe models
- Raise NetworkFailure / ResponseFailure (finder.errors) on failed requests
"""

from abc import ABC, abstractmethod
from typing import List

from finder.models import Recipe


class BaseRecipeConnector(ABC):
    """
    Abstract base class for recipe search connectors.

    Each connector handles the specifics of its provider's API while
    normalizing results into Recipe models.

    Attributes:
        provider: String identifier for the provider (e.g., "edamam")
    """
    provider: str

    @abstractmethod
    def search_recipes(self, query: str) -> List[Recipe]:
        """
        Search recipes matching a free-text query.

        Args:
            query: Search query string (e.g., "pasta"). May be empty.

        Returns:
            List of Recipe objects, possibly empty, in provider order.

        Raises:
            NetworkFailure: If the request could not be sent or received.
            ResponseFailure: If the provider returned a non-success status
                or a body without a results list.
        """
        pass
