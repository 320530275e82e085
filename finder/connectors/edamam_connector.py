"""
Edamam connector using the Recipe Search API v2.

This connector interfaces with Edamam's public recipe search endpoint to look up
recipes by free-text query and parse them into Recipe models.

The connector:
- Issues exactly one GET per search (type=public, q=<query>, app_id, app_key)
- Sends the optional Edamam-Account-User header when configured
- Parses the JSON body into SearchResponse and returns its recipes
- Maps transport errors to NetworkFailure and non-2xx or malformed bodies to
  ResponseFailure; it never retries

Requires EDAMAM_APP_ID and EDAMAM_APP_KEY in the environment or .env file.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from finder.config import EdamamConfig
from finder.errors import NetworkFailure, ResponseFailure
from finder.models import Recipe, SearchResponse

from .base import BaseRecipeConnector

logger = logging.getLogger(__name__)


class EdamamConnector(BaseRecipeConnector):
    """
    Connector for the Edamam Recipe Search API.

    Credentials and endpoint settings default to finder.config.EdamamConfig,
    so a bare EdamamConnector() reads them from the environment.
    """
    provider = "edamam"

    def __init__(
        self,
        app_id: Optional[str] = None,
        app_key: Optional[str] = None,
        base_url: Optional[str] = None,
        account_user: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the Edamam connector.

        Args:
            app_id: Edamam application id (optional, reads EDAMAM_APP_ID if not provided)
            app_key: Edamam application key (optional, reads EDAMAM_APP_KEY if not provided)
            base_url: Search endpoint (optional, reads EDAMAM_BASE_URL or uses the public v2 URL)
            account_user: Value for the Edamam-Account-User header (optional)
            timeout: Request timeout in seconds (optional, reads EDAMAM_TIMEOUT_SECONDS)

        Raises:
            RuntimeError: If the app id or key is not set.
        """
        self.app_id = app_id or EdamamConfig.get_app_id()
        self.app_key = app_key or EdamamConfig.get_app_key()

        if not self.app_id or not self.app_key:
            raise RuntimeError(
                "EDAMAM_APP_ID and EDAMAM_APP_KEY must be set. Please add them to your .env file "
                "at the project root:\n"
                "EDAMAM_APP_ID=your_app_id\n"
                "EDAMAM_APP_KEY=your_app_key"
            )

        self.base_url = (base_url or EdamamConfig.get_base_url()).rstrip("/")
        self.account_user = account_user or EdamamConfig.get_account_user()
        self.timeout = timeout or EdamamConfig.get_timeout_seconds()

    def _build_params(self, query: str) -> Dict[str, Any]:
        return {
            "type": "public",
            "q": query,
            "app_id": self.app_id,
            "app_key": self.app_key,
        }

    def _build_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.account_user:
            headers["Edamam-Account-User"] = self.account_user
        return headers

    def search_recipes(self, query: str) -> List[Recipe]:
        """
        Search Edamam for recipes matching the query.

        Empty queries are sent as-is; the provider decides what they return.

        Args:
            query: Search query string (e.g., "pasta")

        Returns:
            List of Recipe objects in the order the API returned them.

        Raises:
            NetworkFailure: On timeouts, connection errors and other transport errors.
            ResponseFailure: On non-2xx statuses, non-JSON bodies, or bodies
                without a valid "hits" list.
        """
        logger.info("Recipe search: provider=%s query=%r", self.provider, query)
        logger.debug("GET %s timeout=%.1fs", self.base_url, self.timeout)

        try:
            response = requests.get(
                self.base_url,
                params=self._build_params(query),
                headers=self._build_headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise ResponseFailure(
                f"Edamam returned HTTP {status_code} for query {query!r}",
                status_code=status_code,
                user_message=f"The recipe service returned an error ({status_code}). Please try again.",
            ) from e
        except requests.exceptions.Timeout as e:
            raise NetworkFailure(
                f"Edamam request timed out after {self.timeout}s: {e}",
                user_message="The recipe service took too long to respond. Please try again.",
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkFailure(
                f"Could not connect to Edamam: {e}",
                user_message="Could not reach the recipe service. Please check your connection.",
            ) from e
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(
                f"Edamam request failed: {e}",
                user_message=f"An error occurred while searching: {e}",
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseFailure(
                f"Edamam returned a non-JSON body for query {query!r}",
                status_code=response.status_code,
                user_message="The recipe service sent an unreadable response.",
            ) from e

        try:
            parsed = SearchResponse.model_validate(data)
        except ValidationError as e:
            raise ResponseFailure(
                f"Unexpected response format from Edamam: {e}",
                status_code=response.status_code,
                user_message="The recipe service sent an unexpected response.",
            ) from e

        recipes = parsed.recipes
        logger.info("Edamam returned %d recipes for query=%r", len(recipes), query)
        return recipes
