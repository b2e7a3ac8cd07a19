from __future__ import annotations

from typing import TYPE_CHECKING

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import InMemoryStore, PostRecord
from .cascade import cascade_delete_post
from .lookup import find_user, index_of

if TYPE_CHECKING:
    from ..mutations.root import CreatePostInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)

# Placeholder returned by the `post` query; not backed by the store and has no author.
POST_PLACEHOLDER = PostRecord(
    id="ABC456",
    title="post 1",
    body="body 1",
    published=True,
    author="",
)


# Query resolvers
def resolve_posts(store: InMemoryStore, query: str | None = None) -> list[Post]:
    """
    Resolve all posts, or those whose title or body contains ``query``.

    Matching is a case-insensitive substring test.
    """
    from ..types.post import Post as PostType

    if not query:
        return [PostType.from_record(post) for post in store.posts]

    needle = query.lower()
    return [
        PostType.from_record(post)
        for post in store.posts
        if needle in post.title.lower() or needle in post.body.lower()
    ]


def resolve_placeholder_post() -> Post:
    """Return the fixed placeholder post."""
    from ..types.post import Post as PostType

    return PostType.from_record(POST_PLACEHOLDER)


# Field resolvers
def resolve_post_author(store: InMemoryStore, post: Post) -> User | None:
    from ..types.user import User as UserType

    author = find_user(store, post.author_id)
    if author is None:
        return None
    return UserType.from_record(author)


def resolve_post_comments(store: InMemoryStore, post: Post) -> list[Comment]:
    from ..types.comment import Comment as CommentType

    return [
        CommentType.from_record(comment) for comment in store.comments if comment.post == post.id
    ]


# Mutation resolvers
def create_post(store: InMemoryStore, data: CreatePostInput) -> Post:
    """
    Create a new post.

    Raises:
        NotFoundError: the author does not exist
    """
    from ..types.post import Post as PostType

    if find_user(store, data.author) is None:
        logger.info("Post creation rejected: author not found", author_id=data.author)
        raise NotFoundError("User not found.")

    record = PostRecord(
        id=store.new_id(),
        title=data.title,
        body=data.body,
        published=data.published,
        author=data.author,
    )
    store.posts.append(record)

    logger.info("Post created", post_id=record.id, author_id=record.author)
    return PostType.from_record(record)


def delete_post(store: InMemoryStore, id: str) -> Post:
    """
    Delete a post and every comment attached to it.

    Raises:
        NotFoundError: no post has this id
    """
    from ..types.post import Post as PostType

    position = index_of(store.posts, id)
    if position == -1:
        logger.info("Post deletion rejected: not found", post_id=id)
        raise NotFoundError("Post not found.")

    removed = store.posts.pop(position)
    comments = cascade_delete_post(store, removed.id)

    logger.info("Post deleted", post_id=removed.id, comments_removed=len(comments))
    return PostType.from_record(removed)
