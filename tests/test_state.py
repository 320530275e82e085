"""
Tests for the search state reducer and QueryStateHolder.

These tests drive the store with messages only, so they cover the full
Idle -> Loading -> Success/Failure flow without a UI or network.
"""

import threading

import pytest

from finder.state import (
    CommitQuery,
    FetchFailed,
    FetchPhase,
    FetchRequest,
    FetchSucceeded,
    Mount,
    QueryStateHolder,
    RecipeStore,
    SelectRecipe,
    SetDraftText,
    apply,
    pending_request,
    recipe_id_for,
)

from conftest import recipe


class TestReducer:
    """Tests for apply()."""

    def test_initial_store_is_idle(self):
        store = RecipeStore()
        assert store.status.phase is FetchPhase.IDLE
        assert store.search.draft_text == ""
        assert store.search.committed_query == ""
        assert pending_request(store) is None

    def test_set_draft_text_only_changes_draft(self):
        store = apply(RecipeStore(), SetDraftText("pas"))
        assert store.search.draft_text == "pas"
        assert store.search.committed_query == ""
        assert store.status.phase is FetchPhase.IDLE

    def test_mount_commits_default_query_and_keeps_draft(self):
        """Test the initial load starts fetching the default query."""
        store = apply(RecipeStore(), Mount("chicken"))
        assert store.search.committed_query == "chicken"
        assert store.search.draft_text == ""
        assert store.status.phase is FetchPhase.LOADING
        assert pending_request(store) == FetchRequest(generation=1, query="chicken")

    def test_commit_copies_draft_clears_selection_and_starts_loading(self):
        store = apply(RecipeStore(), SetDraftText("pasta"))
        store = apply(store, SelectRecipe("#0"))
        store = apply(store, CommitQuery())

        assert store.search.committed_query == "pasta"
        assert store.search.selected_recipe_id is None
        assert store.status.phase is FetchPhase.LOADING
        assert store.generation == 1

    def test_success_stores_recipes(self):
        store = apply(apply(RecipeStore(), SetDraftText("pasta")), CommitQuery())
        store = apply(store, FetchSucceeded(1, "pasta", (recipe("Pasta"),)))

        assert store.status.phase is FetchPhase.SUCCESS
        assert [r.label for r in store.status.recipes] == ["Pasta"]
        assert pending_request(store) is None

    def test_failure_replaces_previous_results(self):
        """Test an error after a success leaves no stale results behind."""
        store = apply(apply(RecipeStore(), SetDraftText("pasta")), CommitQuery())
        store = apply(store, FetchSucceeded(1, "pasta", (recipe("Pasta"),)))
        store = apply(apply(store, SetDraftText("soup")), CommitQuery())
        store = apply(store, FetchFailed(2, "soup", "The recipe service returned an error (500)."))

        assert store.status.phase is FetchPhase.FAILURE
        assert store.status.recipes == ()
        assert store.status.error == "The recipe service returned an error (500)."

    def test_new_commit_discards_previous_results(self):
        store = apply(apply(RecipeStore(), SetDraftText("pasta")), CommitQuery())
        store = apply(store, FetchSucceeded(1, "pasta", (recipe("Pasta"),)))
        store = apply(store, CommitQuery())

        assert store.status.phase is FetchPhase.LOADING
        assert store.status.recipes == ()

    def test_stale_response_is_discarded(self):
        """Test Q1 resolving after Q2 never overwrites Q2's results."""
        store = apply(apply(RecipeStore(), SetDraftText("pasta")), CommitQuery())
        store = apply(apply(store, SetDraftText("salad")), CommitQuery())

        store = apply(store, FetchSucceeded(2, "salad", (recipe("Green Salad"),)))
        after_stale = apply(store, FetchSucceeded(1, "pasta", (recipe("Pasta"),)))

        assert after_stale is store
        assert [r.label for r in after_stale.status.recipes] == ["Green Salad"]

    def test_stale_failure_is_discarded_while_loading(self):
        store = apply(apply(RecipeStore(), SetDraftText("pasta")), CommitQuery())
        store = apply(apply(store, SetDraftText("salad")), CommitQuery())

        store = apply(store, FetchFailed(1, "pasta", "timeout"))

        assert store.status.phase is FetchPhase.LOADING

    def test_repeated_commit_of_same_query_refetches(self):
        """Test an unchanged query is not deduplicated and supersedes the earlier fetch."""
        store = apply(apply(RecipeStore(), SetDraftText("pasta")), CommitQuery())
        store = apply(store, CommitQuery())

        assert store.generation == 2
        assert pending_request(store) == FetchRequest(2, "pasta")
        assert apply(store, FetchSucceeded(1, "pasta", ())) is store

    def test_empty_query_commit_still_fetches(self):
        store = apply(RecipeStore(), CommitQuery())
        assert pending_request(store) == FetchRequest(1, "")

    def test_select_and_close_leave_status_unchanged(self):
        store = apply(apply(RecipeStore(), SetDraftText("pasta")), CommitQuery())
        store = apply(store, FetchSucceeded(1, "pasta", (recipe("A"), recipe("B"))))
        status_before = store.status

        store = apply(store, SelectRecipe("#1"))
        assert store.search.selected_recipe_id == "#1"
        store = apply(store, SelectRecipe(None))

        assert store.search.selected_recipe_id is None
        assert store.status is status_before

    def test_unknown_message_raises(self):
        with pytest.raises(TypeError):
            apply(RecipeStore(), object())


class TestRecipeIds:
    def test_uri_is_preferred(self):
        assert recipe_id_for(recipe("Pasta"), 3).endswith("#recipe_pasta")

    def test_position_used_without_uri(self):
        assert recipe_id_for(recipe("Pasta", uri=None), 3) == "#3"

    def test_same_uri_at_different_positions(self):
        shared = recipe("Pasta")
        assert recipe_id_for(shared, 0) != recipe_id_for(shared, 1)


class TestQueryStateHolder:
    """Tests for the mutable holder used by the UI."""

    def test_holder_operations(self):
        holder = QueryStateHolder()
        holder.set_draft_text("pasta")
        request = holder.commit_query()

        assert request == FetchRequest(1, "pasta")
        assert holder.status.phase is FetchPhase.LOADING

        holder.dispatch(FetchSucceeded(1, "pasta", (recipe("Pasta"),)))
        holder.select_recipe("#0")
        assert holder.search.selected_recipe_id == "#0"

        holder.select_recipe(None)
        assert holder.search.selected_recipe_id is None
        assert holder.status.phase is FetchPhase.SUCCESS

    def test_concurrent_commits_are_not_lost(self):
        """Test commits from overlapping reruns each get their own generation."""
        holder = QueryStateHolder()
        holder.set_draft_text("pasta")
        requests = []
        start = threading.Barrier(8)

        def commit_many():
            start.wait()
            for _ in range(50):
                requests.append(holder.commit_query())
                holder.dispatch(SetDraftText("pasta"))

        threads = [threading.Thread(target=commit_many) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert holder.store.generation == 400
        assert sorted(r.generation for r in requests) == list(range(1, 401))
        assert holder.status.phase is FetchPhase.LOADING
