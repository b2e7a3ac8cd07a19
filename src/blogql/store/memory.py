"""
Process-local entity tables
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field

from .models import CommentRecord, PostRecord, UserRecord


def _uuid4_str() -> str:
    return str(uuid.uuid4())


@dataclass
class InMemoryStore:
    """Holds the users, posts and comments tables.

    The store has no behaviour of its own beyond id generation; all
    validation and cascading lives in the resolver layer, which receives
    the store explicitly on every call. Contents are lost on process exit.
    """

    users: list[UserRecord] = field(default_factory=list)
    posts: list[PostRecord] = field(default_factory=list)
    comments: list[CommentRecord] = field(default_factory=list)
    id_factory: Callable[[], str] = _uuid4_str

    def new_id(self) -> str:
        """Return a fresh id for a new entity."""
        return self.id_factory()

    def clear(self) -> None:
        self.users.clear()
        self.posts.clear()
        self.comments.clear()

    def is_empty(self) -> bool:
        return not (self.users or self.posts or self.comments)

    def counts(self) -> dict[str, int]:
        return {
            "users": len(self.users),
            "posts": len(self.posts),
            "comments": len(self.comments),
        }
