"""
Root GraphQL mutation definitions
"""

import strawberry

from ..context import get_store_from_info
from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


# Input types for mutations
@strawberry.input
class CreateUserInput:
    """Input for creating a new user."""

    name: str
    email: str
    age: int | None = None


@strawberry.input
class CreatePostInput:
    """Input for creating a new post."""

    title: str
    body: str
    published: bool
    author: strawberry.ID


@strawberry.input
class CreateCommentInput:
    """Input for creating a new comment."""

    text: str
    author: strawberry.ID
    post: strawberry.ID


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    def create_user(self, info: strawberry.Info, data: CreateUserInput) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return create_user(get_store_from_info(info), data)

    @strawberry.mutation(name="deleteUser")
    def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> User:
        """Delete a user along with their posts and comments."""
        from ..resolvers.user import delete_user

        return delete_user(get_store_from_info(info), id)

    # Post mutations
    @strawberry.mutation(name="createPost")
    def create_post(self, info: strawberry.Info, data: CreatePostInput) -> Post:
        """Create a new post."""
        from ..resolvers.post import create_post

        return create_post(get_store_from_info(info), data)

    @strawberry.mutation(name="deletePost")
    def delete_post(self, info: strawberry.Info, id: strawberry.ID) -> Post:
        """Delete a post along with its comments."""
        from ..resolvers.post import delete_post

        return delete_post(get_store_from_info(info), id)

    # Comment mutations
    @strawberry.mutation(name="createComment")
    def create_comment(self, info: strawberry.Info, data: CreateCommentInput) -> Comment:
        """Create a comment on a published post."""
        from ..resolvers.comment import create_comment

        return create_comment(get_store_from_info(info), data)

    @strawberry.mutation(name="deleteComment")
    def delete_comment(self, info: strawberry.Info, id: strawberry.ID) -> Comment:
        """Delete a comment."""
        from ..resolvers.comment import delete_comment

        return delete_comment(get_store_from_info(info), id)
