"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import PostRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str
    body: str
    published: bool
    author_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: PostRecord) -> "Post":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            body=record.body,
            published=record.published,
            author_id=record.author,
        )

    @strawberry.field
    def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author of this post."""
        from ..resolvers.post import resolve_post_author

        return resolve_post_author(get_store_from_info(info), self)

    @strawberry.field
    def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get comments left on this post."""
        from ..resolvers.post import resolve_post_comments

        return resolve_post_comments(get_store_from_info(info), self)
