from __future__ import annotations

from typing import TYPE_CHECKING

from ...errors import ConflictError, NotFoundError
from ...logging import get_logger
from ...store import InMemoryStore, UserRecord
from .cascade import cascade_delete_user
from .lookup import email_taken, index_of

if TYPE_CHECKING:
    from ..mutations.root import CreateUserInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

# Placeholder returned by the `me` query; not backed by the store.
ME_PLACEHOLDER = UserRecord(id="ABC123", name="Me", email="me@mail.com")


# Query resolvers
def resolve_users(store: InMemoryStore, query: str | None = None) -> list[User]:
    """
    Resolve all users, or those whose name contains ``query``.

    Matching is a case-insensitive substring test; an empty query matches
    everything.
    """
    from ..types.user import User as UserType

    if not query:
        return [UserType.from_record(user) for user in store.users]

    needle = query.lower()
    return [UserType.from_record(user) for user in store.users if needle in user.name.lower()]


def resolve_me() -> User:
    """Return the fixed placeholder user."""
    from ..types.user import User as UserType

    return UserType.from_record(ME_PLACEHOLDER)


# Field resolvers
def resolve_user_posts(store: InMemoryStore, user: User) -> list[Post]:
    from ..types.post import Post as PostType

    return [PostType.from_record(post) for post in store.posts if post.author == user.id]


def resolve_user_comments(store: InMemoryStore, user: User) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    return [
        CommentType.from_record(comment)
        for comment in store.comments
        if comment.author == user.id
    ]


# Mutation resolvers
def create_user(store: InMemoryStore, data: CreateUserInput) -> User:
    """
    Create a new user.

    Raises:
        ConflictError: another user already has this email
    """
    from ..types.user import User as UserType

    if email_taken(store, data.email):
        logger.info("User creation rejected: email taken")
        raise ConflictError("Email taken.")

    record = UserRecord(
        id=store.new_id(),
        name=data.name,
        email=data.email,
        age=data.age,
    )
    store.users.append(record)

    logger.info("User created", user_id=record.id)
    return UserType.from_record(record)


def delete_user(store: InMemoryStore, id: str) -> User:
    """
    Delete a user together with their posts, the comments on those posts,
    and their own comments.

    Raises:
        NotFoundError: no user has this id
    """
    from ..types.user import User as UserType

    position = index_of(store.users, id)
    if position == -1:
        logger.info("User deletion rejected: not found", user_id=id)
        raise NotFoundError("User not found.")

    removed = store.users.pop(position)
    cascade = cascade_delete_user(store, removed.id)

    logger.info(
        "User deleted",
        user_id=removed.id,
        posts_removed=len(cascade.posts),
        comments_removed=len(cascade.comments),
    )
    return UserType.from_record(removed)
