"""
Store record definitions.

Records hold foreign keys as plain id strings; the GraphQL types resolve
them into objects.
"""

from dataclasses import dataclass


@dataclass
class UserRecord:
    id: str
    name: str
    email: str
    age: int | None = None


@dataclass
class PostRecord:
    id: str
    title: str
    body: str
    published: bool
    author: str  # UserRecord.id


@dataclass
class CommentRecord:
    id: str
    text: str
    author: str  # UserRecord.id
    post: str  # PostRecord.id
