"""
Search state holder and fetch status reducer.

All state changes go through apply(), a pure function from (store, message)
to a new store. User input and fetch resolutions are both messages, so the
whole flow can be replayed in tests without a UI.

Flow:
    SetDraftText -> draft_text changes, nothing else
    CommitQuery  -> committed_query = draft_text, selection cleared,
                    generation + 1, status Loading
    FetchSucceeded / FetchFailed -> applied only when their generation is the
                    store's current generation; otherwise discarded as stale
    SelectRecipe -> selection changes, status untouched

# NOTE: Empty or unchanged queries are committed like any other; a repeat
    commit issues a new fetch with a new generation.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple, Union

from finder.models import Recipe

logger = logging.getLogger(__name__)


class FetchPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class FetchStatus:
    """
    Result of the latest fetch.

    Attributes:
        phase: Current phase
        recipes: Fetched recipes (SUCCESS only, possibly empty)
        error: Human-readable failure reason (FAILURE only)
    """
    phase: FetchPhase = FetchPhase.IDLE
    recipes: Tuple[Recipe, ...] = ()
    error: Optional[str] = None

    @classmethod
    def idle(cls) -> "FetchStatus":
        return cls()

    @classmethod
    def loading(cls) -> "FetchStatus":
        return cls(phase=FetchPhase.LOADING)

    @classmethod
    def success(cls, recipes: List[Recipe]) -> "FetchStatus":
        return cls(phase=FetchPhase.SUCCESS, recipes=tuple(recipes))

    @classmethod
    def failure(cls, reason: str) -> "FetchStatus":
        return cls(phase=FetchPhase.FAILURE, error=reason)


@dataclass(frozen=True)
class SearchState:
    draft_text: str = ""
    committed_query: str = ""
    selected_recipe_id: Optional[str] = None


@dataclass(frozen=True)
class RecipeStore:
    """
    Everything the page renders from.

    generation counts commits; each fetch is tagged with the generation it
    was issued for.
    """
    search: SearchState = field(default_factory=SearchState)
    status: FetchStatus = field(default_factory=FetchStatus)
    generation: int = 0


@dataclass(frozen=True)
class FetchRequest:
    """A fetch to run: the query and the commit generation it belongs to."""
    generation: int
    query: str


# Messages

@dataclass(frozen=True)
class Mount:
    """Initial page load: commit the default query without touching the draft."""
    query: str


@dataclass(frozen=True)
class SetDraftText:
    text: str


@dataclass(frozen=True)
class CommitQuery:
    pass


@dataclass(frozen=True)
class SelectRecipe:
    """Open the detail view for recipe_id, or close it with None."""
    recipe_id: Optional[str]


@dataclass(frozen=True)
class FetchSucceeded:
    generation: int
    query: str
    recipes: Tuple[Recipe, ...]


@dataclass(frozen=True)
class FetchFailed:
    generation: int
    query: str
    reason: str


Message = Union[Mount, SetDraftText, CommitQuery, SelectRecipe, FetchSucceeded, FetchFailed]


def recipe_id_for(recipe: Recipe, position: int) -> str:
    """
    Stable id for a recipe within one result list.

    Always prefixed with the position, since the provider can return the
    same URI for more than one hit.
    """
    if recipe.uri:
        return f"{position}:{recipe.uri}"
    return f"#{position}"


def _start_fetch(store: RecipeStore, search: SearchState) -> RecipeStore:
    return RecipeStore(
        search=search,
        status=FetchStatus.loading(),
        generation=store.generation + 1,
    )


def _is_current(store: RecipeStore, generation: int, query: str) -> bool:
    if generation != store.generation or store.status.phase is not FetchPhase.LOADING:
        logger.warning(
            "Discarding stale response for query=%r (generation %d, current %d)",
            query, generation, store.generation,
        )
        return False
    return True


def apply(store: RecipeStore, message: Message) -> RecipeStore:
    """
    Apply one message to the store.

    Args:
        store: Current store (never mutated)
        message: Message to apply

    Returns:
        The new store. Stale fetch resolutions return the store unchanged.

    Raises:
        TypeError: If message is not one of the known message types.
    """
    if isinstance(message, SetDraftText):
        return replace(store, search=replace(store.search, draft_text=message.text))

    if isinstance(message, CommitQuery):
        search = replace(
            store.search,
            committed_query=store.search.draft_text,
            selected_recipe_id=None,
        )
        return _start_fetch(store, search)

    if isinstance(message, Mount):
        search = replace(store.search, committed_query=message.query, selected_recipe_id=None)
        return _start_fetch(store, search)

    if isinstance(message, SelectRecipe):
        return replace(store, search=replace(store.search, selected_recipe_id=message.recipe_id))

    if isinstance(message, FetchSucceeded):
        if not _is_current(store, message.generation, message.query):
            return store
        return replace(store, status=FetchStatus.success(list(message.recipes)))

    if isinstance(message, FetchFailed):
        if not _is_current(store, message.generation, message.query):
            return store
        return replace(store, status=FetchStatus.failure(message.reason))

    raise TypeError(f"Unknown message type: {type(message).__name__}")


def pending_request(store: RecipeStore) -> Optional[FetchRequest]:
    """The fetch the store is waiting on, or None when nothing is loading."""
    if store.status.phase is not FetchPhase.LOADING:
        return None
    return FetchRequest(generation=store.generation, query=store.search.committed_query)


class QueryStateHolder:
    """
    Mutable handle around a RecipeStore.

    The UI keeps one of these per session and calls its methods from event
    handlers; every method is a thin wrapper over apply().

    Streamlit can start a new script run (and its widget callbacks) while the
    previous run is still waiting on a fetch, so updates are serialized with
    a lock.
    """

    def __init__(self, store: Optional[RecipeStore] = None) -> None:
        self.store = store or RecipeStore()
        self._lock = threading.RLock()

    def dispatch(self, message: Message) -> RecipeStore:
        with self._lock:
            self.store = apply(self.store, message)
            return self.store

    def set_draft_text(self, text: str) -> None:
        self.dispatch(SetDraftText(text))

    def commit_query(self) -> FetchRequest:
        """Commit the draft and return the fetch that now needs to run."""
        with self._lock:
            store = self.dispatch(CommitQuery())
            return FetchRequest(store.generation, store.search.committed_query)

    def select_recipe(self, recipe_id: Optional[str]) -> None:
        self.dispatch(SelectRecipe(recipe_id))

    @property
    def search(self) -> SearchState:
        return self.store.search

    @property
    def status(self) -> FetchStatus:
        return self.store.status
