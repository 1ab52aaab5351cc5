"""Common services package."""

from user_common.services.user_store import InMemoryUserStore, UserStore

__all__ = [
    "InMemoryUserStore",
    "UserStore",
]
