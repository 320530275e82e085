"""
Fetch-and-render cycle.

run_fetch() is the single boundary between the connector and the store: it
calls the connector and always returns a message, never raises. FetchCycle
ties a QueryStateHolder to a connector so the UI can commit a query and then
resolve whatever fetch is pending.

Flow: UI commit -> QueryStateHolder.commit_query() -> FetchRequest ->
run_fetch() -> connector.search_recipes() -> FetchSucceeded / FetchFailed ->
apply() (stale results dropped there)
"""

import logging
from typing import Callable, Optional, Union

from finder.connectors.base import BaseRecipeConnector
from finder.errors import RecipeFetchError
from finder.state import (
    FetchFailed,
    FetchRequest,
    FetchSucceeded,
    Mount,
    QueryStateHolder,
    RecipeStore,
    pending_request,
)

logger = logging.getLogger(__name__)

ConnectorFactory = Callable[[], BaseRecipeConnector]


def run_fetch(
    connector: Union[BaseRecipeConnector, ConnectorFactory],
    request: FetchRequest,
) -> Union[FetchSucceeded, FetchFailed]:
    """
    Run one fetch and convert its outcome into a message.

    Args:
        connector: A connector, or a zero-argument factory returning one.
            Factory errors (e.g. missing credentials) become FetchFailed too.
        request: Query and generation to fetch for

    Returns:
        FetchSucceeded with the recipes, or FetchFailed with a user-facing reason.
    """
    try:
        if not isinstance(connector, BaseRecipeConnector):
            connector = connector()
        recipes = connector.search_recipes(request.query)
    except RecipeFetchError as e:
        logger.warning("Recipe fetch failed for query=%r: %s", request.query, e)
        return FetchFailed(request.generation, request.query, e.user_message)
    except RuntimeError as e:
        logger.error("Recipe search unavailable: %s", e)
        return FetchFailed(request.generation, request.query, f"Recipe search is not available: {e}")
    except Exception as e:
        logger.error("Unexpected error during recipe fetch for query=%r: %s", request.query, e, exc_info=True)
        return FetchFailed(request.generation, request.query, f"An unexpected error occurred: {e}")

    return FetchSucceeded(request.generation, request.query, tuple(recipes))


class FetchCycle:
    """
    Drives fetches for one QueryStateHolder.

    The connector is created lazily on the first fetch and then reused.
    """

    def __init__(
        self,
        holder: QueryStateHolder,
        connector: Union[BaseRecipeConnector, ConnectorFactory],
    ) -> None:
        self.holder = holder
        self._connector_source = connector
        self._connector: Optional[BaseRecipeConnector] = (
            connector if isinstance(connector, BaseRecipeConnector) else None
        )

    def _get_connector(self) -> BaseRecipeConnector:
        if self._connector is None:
            self._connector = self._connector_source()
        return self._connector

    def mount(self, default_query: str) -> FetchRequest:
        """Commit the default query on first load."""
        store = self.holder.dispatch(Mount(default_query))
        return FetchRequest(store.generation, default_query)

    def commit(self) -> FetchRequest:
        return self.holder.commit_query()

    def resolve(self, request: FetchRequest) -> RecipeStore:
        """Run the fetch for request and apply its result (dropped if stale)."""
        message = run_fetch(self._get_connector, request)
        return self.holder.dispatch(message)

    def resolve_pending(self) -> Optional[RecipeStore]:
        """Resolve the fetch the store is waiting on, if any."""
        request = pending_request(self.holder.store)
        if request is None:
            return None
        return self.resolve(request)
