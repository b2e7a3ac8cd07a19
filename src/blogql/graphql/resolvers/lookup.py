"""
Linear-scan lookups over the store tables
"""

from collections.abc import Sequence
from typing import Protocol

from ...store import InMemoryStore, PostRecord, UserRecord


class HasId(Protocol):
    id: str


def find_user(store: InMemoryStore, user_id: str | None) -> UserRecord | None:
    return next((user for user in store.users if user.id == user_id), None)


def find_post(store: InMemoryStore, post_id: str | None) -> PostRecord | None:
    return next((post for post in store.posts if post.id == post_id), None)


def find_published_post(store: InMemoryStore, post_id: str) -> PostRecord | None:
    return next(
        (post for post in store.posts if post.id == post_id and post.published),
        None,
    )


def email_taken(store: InMemoryStore, email: str) -> bool:
    return any(user.email == email for user in store.users)


def index_of(records: Sequence[HasId], record_id: str) -> int:
    """Return the position of the record with ``record_id``, or -1."""
    for position, record in enumerate(records):
        if record.id == record_id:
            return position
    return -1
