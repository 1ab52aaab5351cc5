"""Error hierarchy for user store failures.

Every error carries a machine-readable code, a client-facing message and the
HTTP status the API layer answers with. ``to_response()`` builds the same
``{message, data}`` envelope successful responses use.
"""

from typing import Any


class UserStoreError(Exception):
    """Base exception for all user store errors."""

    code = "USER_STORE_ERROR"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        """Convert to the standard response envelope."""
        return {"message": self.message, "data": None}


class InvalidInputError(UserStoreError):
    """A required field is missing or empty, or an id is not numeric."""

    code = "INVALID_INPUT"
    http_status = 400


class DuplicateEmailError(UserStoreError):
    """The e-mail is already registered (case-insensitive, deleted users included)."""

    code = "DUPLICATE_EMAIL"
    http_status = 400

    def __init__(self, message: str = "Email already registered") -> None:
        super().__init__(message)


class UserNotFoundError(UserStoreError):
    """The id was never assigned or belongs to a soft-deleted user."""

    code = "USER_NOT_FOUND"
    http_status = 404

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)
