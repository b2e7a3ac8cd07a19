"""
Demo data for a freshly started server.

Seeding goes through the create resolvers so the dataset obeys the same
uniqueness and reference rules as client-created data.
"""

from __future__ import annotations

from ..logging import get_logger
from .memory import InMemoryStore

logger = get_logger(__name__)

DEMO_USERS = [
    {"key": "andrew", "name": "Andrew", "email": "andrew@example.com", "age": 27},
    {"key": "sarah", "name": "Sarah", "email": "sarah@example.com", "age": None},
    {"key": "mike", "name": "Mike", "email": "mike@example.com", "age": None},
]

DEMO_POSTS = [
    {
        "key": "graphql",
        "title": "GraphQL 101",
        "body": "This is how to use GraphQL...",
        "published": True,
        "author": "andrew",
    },
    {
        "key": "advanced",
        "title": "GraphQL 201",
        "body": "This is an advanced GraphQL post...",
        "published": False,
        "author": "andrew",
    },
    {
        "key": "programming",
        "title": "Programming Music",
        "body": "",
        "published": True,
        "author": "mike",
    },
]

DEMO_COMMENTS = [
    {"text": "Great post, thanks for sharing!", "author": "sarah", "post": "graphql"},
    {"text": "Glad you enjoyed it.", "author": "andrew", "post": "graphql"},
    {"text": "This did not work for me.", "author": "mike", "post": "programming"},
]


def seed_demo_data(store: InMemoryStore) -> dict[str, int]:
    """
    Populate an empty store with the demo users, posts and comments.

    Returns the store counts afterwards. A store that already holds data is
    left untouched.
    """
    from ..graphql.mutations.root import CreateCommentInput, CreatePostInput, CreateUserInput
    from ..graphql.resolvers.comment import create_comment
    from ..graphql.resolvers.post import create_post
    from ..graphql.resolvers.user import create_user

    if not store.is_empty():
        logger.info("Store already contains data, skipping demo seed", **store.counts())
        return store.counts()

    user_ids: dict[str, str] = {}
    for user in DEMO_USERS:
        created = create_user(
            store,
            CreateUserInput(name=user["name"], email=user["email"], age=user["age"]),
        )
        user_ids[user["key"]] = created.id

    post_ids: dict[str, str] = {}
    for post in DEMO_POSTS:
        created = create_post(
            store,
            CreatePostInput(
                title=post["title"],
                body=post["body"],
                published=post["published"],
                author=user_ids[post["author"]],
            ),
        )
        post_ids[post["key"]] = created.id

    for comment in DEMO_COMMENTS:
        create_comment(
            store,
            CreateCommentInput(
                text=comment["text"],
                author=user_ids[comment["author"]],
                post=post_ids[comment["post"]],
            ),
        )

    counts = store.counts()
    logger.info("Demo data seeded", **counts)
    return counts
