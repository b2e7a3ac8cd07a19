"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from blogql.store import CommentRecord, InMemoryStore, PostRecord, UserRecord


@pytest.fixture
def store() -> InMemoryStore:
    """An empty store generating uuid4 ids."""
    return InMemoryStore()


@pytest.fixture
def populated_store() -> InMemoryStore:
    """
    A store with fixed ids:

    - users: u1 Alice, u2 Bob
    - posts: p1 (u1, published), p2 (u1, draft), p3 (u2, published)
    - comments: c1 (u2 on p1), c2 (u1 on p3), c3 (u2 on p3)
    """
    return InMemoryStore(
        users=[
            UserRecord(id="u1", name="Alice", email="alice@example.com", age=30),
            UserRecord(id="u2", name="Bob", email="bob@example.com"),
        ],
        posts=[
            PostRecord(
                id="p1", title="Hello World", body="First post", published=True, author="u1"
            ),
            PostRecord(id="p2", title="Drafts", body="Not yet", published=False, author="u1"),
            PostRecord(
                id="p3", title="Cooking", body="A recipe for GraphQL", published=True, author="u2"
            ),
        ],
        comments=[
            CommentRecord(id="c1", text="Nice!", author="u2", post="p1"),
            CommentRecord(id="c2", text="Tasty", author="u1", post="p3"),
            CommentRecord(id="c3", text="Thanks", author="u2", post="p3"),
        ],
    )


@pytest.fixture
def mock_info(store: InMemoryStore):
    """Create a mock GraphQL info object carrying the store in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"store": store, "request": MagicMock()}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
