"""
Tests for demo data seeding
"""

import pytest

from blogql.store import UserRecord
from blogql.store.seed_data import DEMO_COMMENTS, DEMO_POSTS, DEMO_USERS, seed_demo_data


@pytest.mark.unit
class TestSeedDemoData:
    """Tests for seed_demo_data."""

    def test_seed_empty_store(self, store):
        """Seeding an empty store creates the full demo dataset."""
        counts = seed_demo_data(store)

        assert counts == {
            "users": len(DEMO_USERS),
            "posts": len(DEMO_POSTS),
            "comments": len(DEMO_COMMENTS),
        }
        assert {user.email for user in store.users} == {u["email"] for u in DEMO_USERS}

    def test_seeded_references_are_valid(self, store):
        """Every seeded post and comment points at existing rows."""
        seed_demo_data(store)

        user_ids = {user.id for user in store.users}
        published_ids = {post.id for post in store.posts if post.published}

        assert all(post.author in user_ids for post in store.posts)
        assert all(comment.author in user_ids for comment in store.comments)
        assert all(comment.post in published_ids for comment in store.comments)

    def test_seed_non_empty_store_is_noop(self, store):
        """A store that already has data is left untouched."""
        existing = UserRecord(id="keep", name="Keep", email="keep@example.com")
        store.users.append(existing)

        counts = seed_demo_data(store)

        assert counts == {"users": 1, "posts": 0, "comments": 0}
        assert store.users == [existing]
