from __future__ import annotations

from typing import TYPE_CHECKING

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import CommentRecord, InMemoryStore
from .lookup import find_post, find_published_post, find_user, index_of

if TYPE_CHECKING:
    from ..mutations.root import CreateCommentInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
def resolve_comments(store: InMemoryStore) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    return [CommentType.from_record(comment) for comment in store.comments]


# Field resolvers
def resolve_comment_author(store: InMemoryStore, comment: Comment) -> User | None:
    from ..types.user import User as UserType

    author = find_user(store, comment.author_id)
    if author is None:
        return None
    return UserType.from_record(author)


def resolve_comment_post(store: InMemoryStore, comment: Comment) -> Post | None:
    from ..types.post import Post as PostType

    post = find_post(store, comment.post_id)
    if post is None:
        return None
    return PostType.from_record(post)


# Mutation resolvers
def create_comment(store: InMemoryStore, data: CreateCommentInput) -> Comment:
    """
    Create a comment on a published post.

    Raises:
        NotFoundError: the author does not exist, or the post does not exist
            or is unpublished
    """
    from ..types.comment import Comment as CommentType

    if find_user(store, data.author) is None:
        logger.info("Comment creation rejected: author not found", author_id=data.author)
        raise NotFoundError("User not found.")

    if find_published_post(store, data.post) is None:
        logger.info("Comment creation rejected: published post not found", post_id=data.post)
        raise NotFoundError("Post not found.")

    record = CommentRecord(
        id=store.new_id(),
        text=data.text,
        author=data.author,
        post=data.post,
    )
    store.comments.append(record)

    logger.info("Comment created", comment_id=record.id, post_id=record.post)
    return CommentType.from_record(record)


def delete_comment(store: InMemoryStore, id: str) -> Comment:
    """
    Delete a single comment.

    Raises:
        NotFoundError: no comment has this id
    """
    from ..types.comment import Comment as CommentType

    position = index_of(store.comments, id)
    if position == -1:
        logger.info("Comment deletion rejected: not found", comment_id=id)
        raise NotFoundError("Comment not found.")

    removed = store.comments.pop(position)

    logger.info("Comment deleted", comment_id=removed.id)
    return CommentType.from_record(removed)
