"""
Unit tests for comment query and mutation resolvers
"""

import pytest

from blogql.errors import NotFoundError
from blogql.graphql.mutations.root import CreateCommentInput
from blogql.graphql.resolvers.comment import (
    create_comment,
    delete_comment,
    resolve_comment_author,
    resolve_comment_post,
    resolve_comments,
)


class TestResolveComments:
    """Tests for the comments query resolver."""

    def test_returns_all_comments(self, populated_store):
        assert [c.id for c in resolve_comments(populated_store)] == ["c1", "c2", "c3"]

    def test_empty_store(self, store):
        assert resolve_comments(store) == []


class TestCommentFieldResolvers:
    """Tests for Comment.author and Comment.post."""

    def test_comment_author_and_post(self, populated_store):
        comment = resolve_comments(populated_store)[0]

        author = resolve_comment_author(populated_store, comment)
        post = resolve_comment_post(populated_store, comment)

        assert author is not None and author.id == "u2"
        assert post is not None and post.id == "p1"

    def test_dangling_references_resolve_to_none(self, populated_store):
        comment = resolve_comments(populated_store)[0]
        populated_store.users.clear()
        populated_store.posts.clear()

        assert resolve_comment_author(populated_store, comment) is None
        assert resolve_comment_post(populated_store, comment) is None


class TestCreateComment:
    """Tests for create_comment mutation."""

    def test_create_comment_success(self, populated_store):
        result = create_comment(
            populated_store, CreateCommentInput(text="Hi", author="u1", post="p1")
        )

        assert result.id
        assert result.text == "Hi"
        assert (result.author_id, result.post_id) == ("u1", "p1")
        assert populated_store.comments[-1].id == result.id

    def test_unknown_author(self, populated_store):
        before = list(populated_store.comments)

        with pytest.raises(NotFoundError, match="User not found."):
            create_comment(
                populated_store, CreateCommentInput(text="Hi", author="ghost", post="p1")
            )

        assert populated_store.comments == before

    def test_unknown_post(self, populated_store):
        with pytest.raises(NotFoundError, match="Post not found."):
            create_comment(
                populated_store, CreateCommentInput(text="Hi", author="u1", post="ghost")
            )

    def test_unpublished_post(self, populated_store):
        """An existing draft post is treated as not found."""
        before = list(populated_store.comments)

        with pytest.raises(NotFoundError, match="Post not found."):
            create_comment(populated_store, CreateCommentInput(text="Hi", author="u2", post="p2"))

        assert populated_store.comments == before

    def test_author_checked_before_post(self, populated_store):
        """With both references bad, the author error wins."""
        with pytest.raises(NotFoundError, match="User not found."):
            create_comment(
                populated_store, CreateCommentInput(text="Hi", author="ghost", post="p2")
            )


class TestDeleteComment:
    """Tests for delete_comment mutation."""

    def test_delete_comment(self, populated_store):
        result = delete_comment(populated_store, "c2")

        assert result.id == "c2"
        assert [comment.id for comment in populated_store.comments] == ["c1", "c3"]

    def test_delete_comment_has_no_cascade(self, populated_store):
        delete_comment(populated_store, "c1")

        assert len(populated_store.users) == 2
        assert len(populated_store.posts) == 3

    def test_delete_comment_not_found(self, populated_store):
        before = list(populated_store.comments)

        with pytest.raises(NotFoundError, match="Comment not found."):
            delete_comment(populated_store, "missing")

        assert populated_store.comments == before
