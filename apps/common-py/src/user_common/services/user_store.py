"""User store with an in-memory implementation."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable

from user_common.errors import DuplicateEmailError, InvalidInputError, UserNotFoundError
from user_common.models.user import StoredUser, User

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract interface for the user store."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users that are not soft-deleted."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> User:
        """Get a visible user by ID.

        Raises:
            UserNotFoundError: If the id is unknown or soft-deleted
        """
        pass

    @abstractmethod
    def add_user(self, name: str, email: str) -> User:
        """Create a user and assign it the next id.

        Raises:
            InvalidInputError: If name or email is empty
            DuplicateEmailError: If the email is already registered
        """
        pass

    @abstractmethod
    def update_user(self, user_id: int, name: str) -> None:
        """Replace the name of a visible user.

        Raises:
            UserNotFoundError: If the id is unknown or soft-deleted
            InvalidInputError: If name is empty
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Soft-delete a visible user.

        Raises:
            UserNotFoundError: If the id is unknown or already soft-deleted
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of users that are not soft-deleted."""
        pass

    def seed(self, users: Iterable[tuple[str, str]]) -> list[User]:
        """Insert fixed ``(name, email)`` pairs in order.

        Args:
            users: Pairs to insert

        Returns:
            The created users
        """
        return [self.add_user(name, email) for name, email in users]


class InMemoryUserStore(UserStore):
    """In-memory implementation of UserStore.

    Records are never physically removed. Deleted records stay in the mapping
    so their ids are never reused and their emails remain taken.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._users: dict[int, StoredUser] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def _get_visible(self, user_id: int) -> StoredUser:
        user = self._users.get(user_id)
        if user is None or user.deleted:
            raise UserNotFoundError()
        return user

    def _email_taken(self, email: str) -> bool:
        wanted = email.lower()
        return any(user.email.lower() == wanted for user in self._users.values())

    def list_users(self) -> list[User]:
        """List all users that are not soft-deleted."""
        with self._lock:
            return [user.to_user() for user in self._users.values() if not user.deleted]

    def get_user(self, user_id: int) -> User:
        """Get a visible user by ID."""
        with self._lock:
            return self._get_visible(user_id).to_user()

    def add_user(self, name: str, email: str) -> User:
        """Create a user and assign it the next id."""
        if not name or not email:
            raise InvalidInputError("Invalid payload")

        with self._lock:
            if self._email_taken(email):
                raise DuplicateEmailError()

            self._last_id += 1
            user = StoredUser(id=self._last_id, name=name, email=email)
            self._users[user.id] = user

        logger.info("Created user %s", user.id)
        return user.to_user()

    def update_user(self, user_id: int, name: str) -> None:
        """Replace the name of a visible user. Email and id are left untouched."""
        with self._lock:
            user = self._get_visible(user_id)
            if not name:
                raise InvalidInputError("Invalid payload")
            user.name = name

        logger.info("Updated user %s", user_id)

    def delete_user(self, user_id: int) -> None:
        """Soft-delete a visible user."""
        with self._lock:
            user = self._get_visible(user_id)
            user.deleted = True

        logger.info("Deleted user %s", user_id)

    def count(self) -> int:
        """Number of users that are not soft-deleted."""
        with self._lock:
            return sum(1 for user in self._users.values() if not user.deleted)
