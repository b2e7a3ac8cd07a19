"""
In-memory storage for users, posts and comments
"""

from .memory import InMemoryStore
from .models import CommentRecord, PostRecord, UserRecord

__all__ = ["InMemoryStore", "UserRecord", "PostRecord", "CommentRecord"]
