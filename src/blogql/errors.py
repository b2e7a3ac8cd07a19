"""
Error kinds raised by the resolver layer.

Each error carries a machine-readable ``code``. graphql-core copies an
original error's ``extensions`` onto the reported GraphQL error, so clients
see ``{"extensions": {"code": "NOT_FOUND"}}`` next to the message.
"""

from typing import Any


class BlogError(Exception):
    """Base class for precondition failures in blogql operations."""

    code: str = "BAD_REQUEST"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class ConflictError(BlogError):
    """Raised when a create would violate a uniqueness rule."""

    code = "CONFLICT"


class NotFoundError(BlogError):
    """Raised when a referenced user, post or comment does not exist."""

    code = "NOT_FOUND"
