"""Pytest configuration for common-py tests."""

import pytest
from user_common.services.user_store import InMemoryUserStore


@pytest.fixture
def store() -> InMemoryUserStore:
    """Create an empty in-memory user store."""
    return InMemoryUserStore()


@pytest.fixture
def seeded_store(store: InMemoryUserStore) -> InMemoryUserStore:
    """Store holding the two startup users (ids 1 and 2)."""
    store.seed([("John Doe", "jhondoe@gmail.com"), ("Jane Doe", "janedow@gmail.com")])
    return store
