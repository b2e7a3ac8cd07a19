"""
Comment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import CommentRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from .post import Post
    from .user import User


@strawberry.type
class Comment:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    text: str
    author_id: strawberry.Private[str]
    post_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: CommentRecord) -> "Comment":
        return cls(
            id=strawberry.ID(record.id),
            text=record.text,
            author_id=record.author,
            post_id=record.post,
        )

    @strawberry.field
    def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author of this comment."""
        from ..resolvers.comment import resolve_comment_author

        return resolve_comment_author(get_store_from_info(info), self)

    @strawberry.field
    def post(self, info: strawberry.Info) -> Annotated["Post", strawberry.lazy(".post")] | None:
        """Get the post this comment belongs to."""
        from ..resolvers.comment import resolve_comment_post

        return resolve_comment_post(get_store_from_info(info), self)
