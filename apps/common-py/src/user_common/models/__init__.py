"""Common models package."""

from user_common.models.user import StoredUser, User

__all__ = [
    "StoredUser",
    "User",
]
