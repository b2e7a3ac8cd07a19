"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import UserRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    age: int | None

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            age=record.age,
        )

    @strawberry.field
    def posts(self, info: strawberry.Info) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Get posts written by this user."""
        from ..resolvers.user import resolve_user_posts

        return resolve_user_posts(get_store_from_info(info), self)

    @strawberry.field
    def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get comments written by this user."""
        from ..resolvers.user import resolve_user_comments

        return resolve_user_comments(get_store_from_info(info), self)
