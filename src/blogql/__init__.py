"""
blogql
In-memory GraphQL API for users, posts and comments
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
