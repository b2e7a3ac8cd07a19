"""
Cascading delete rules.

These remove dependents only; the delete mutations remove the root entity
themselves once its existence has been checked.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...logging import get_logger
from ...store import CommentRecord, InMemoryStore, PostRecord

logger = get_logger(__name__)


@dataclass
class CascadeResult:
    """Dependents removed while deleting a user."""

    posts: list[PostRecord] = field(default_factory=list)
    comments: list[CommentRecord] = field(default_factory=list)


def cascade_delete_post(store: InMemoryStore, post_id: str) -> list[CommentRecord]:
    """Remove every comment attached to ``post_id`` and return the removed comments."""
    removed = [comment for comment in store.comments if comment.post == post_id]
    store.comments[:] = [comment for comment in store.comments if comment.post != post_id]

    logger.debug("Post cascade applied", post_id=post_id, comments_removed=len(removed))
    return removed


def cascade_delete_user(store: InMemoryStore, user_id: str) -> CascadeResult:
    """
    Remove everything owned by ``user_id``.

    Deletes the user's posts along with all comments on those posts, then
    the user's own comments on any remaining post.
    """
    result = CascadeResult()

    result.posts = [post for post in store.posts if post.author == user_id]
    store.posts[:] = [post for post in store.posts if post.author != user_id]

    for post in result.posts:
        result.comments.extend(cascade_delete_post(store, post.id))

    authored = [comment for comment in store.comments if comment.author == user_id]
    store.comments[:] = [comment for comment in store.comments if comment.author != user_id]
    result.comments.extend(authored)

    logger.debug(
        "User cascade applied",
        user_id=user_id,
        posts_removed=len(result.posts),
        comments_removed=len(result.comments),
    )
    return result
