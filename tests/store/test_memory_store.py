"""
Unit tests for the in-memory store
"""

import itertools

import pytest

from blogql.store import InMemoryStore, UserRecord


@pytest.mark.unit
class TestInMemoryStore:
    """Tests for InMemoryStore."""

    def test_new_store_is_empty(self, store):
        """A fresh store has no rows in any table."""
        assert store.is_empty()
        assert store.counts() == {"users": 0, "posts": 0, "comments": 0}

    def test_new_id_defaults_to_unique_uuids(self, store):
        """Default ids are unique non-empty strings."""
        ids = {store.new_id() for _ in range(100)}

        assert len(ids) == 100
        assert all(isinstance(i, str) and i for i in ids)

    def test_new_id_uses_injected_factory(self):
        """A custom id factory is used for every new id."""
        counter = itertools.count(1)
        store = InMemoryStore(id_factory=lambda: f"id-{next(counter)}")

        assert store.new_id() == "id-1"
        assert store.new_id() == "id-2"

    def test_counts_and_clear(self, populated_store):
        """counts() reflects table sizes and clear() empties every table."""
        assert populated_store.counts() == {"users": 2, "posts": 3, "comments": 3}
        assert not populated_store.is_empty()

        populated_store.clear()

        assert populated_store.is_empty()

    def test_stores_do_not_share_tables(self):
        """Each store instance owns its own lists."""
        first = InMemoryStore()
        second = InMemoryStore()

        first.users.append(UserRecord(id="x", name="X", email="x@example.com"))

        assert second.users == []
