"""
Root GraphQL query definitions
"""

import strawberry

from ..context import get_store_from_info
from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def users(self, info: strawberry.Info, query: str | None = None) -> list[User]:
        """Get all users, optionally filtered by a name substring."""
        from ..resolvers.user import resolve_users

        return resolve_users(get_store_from_info(info), query)

    @strawberry.field
    def posts(self, info: strawberry.Info, query: str | None = None) -> list[Post]:
        """Get all posts, optionally filtered by a title or body substring."""
        from ..resolvers.post import resolve_posts

        return resolve_posts(get_store_from_info(info), query)

    @strawberry.field
    def comments(self, info: strawberry.Info) -> list[Comment]:
        """Get all comments."""
        from ..resolvers.comment import resolve_comments

        return resolve_comments(get_store_from_info(info))

    @strawberry.field
    def me(self) -> User:
        """Get the placeholder current user."""
        from ..resolvers.user import resolve_me

        return resolve_me()

    @strawberry.field
    def post(self) -> Post:
        """Get the placeholder post."""
        from ..resolvers.post import resolve_placeholder_post

        return resolve_placeholder_post()
