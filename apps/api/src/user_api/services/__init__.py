"""Service initialization and dependency injection."""

import logging

from fastapi import FastAPI, Request
from user_common.services.user_store import InMemoryUserStore, UserStore

logger = logging.getLogger(__name__)

SEED_USERS: tuple[tuple[str, str], ...] = (
    ("John Doe", "jhondoe@gmail.com"),
    ("Jane Doe", "janedow@gmail.com"),
)


def init_user_store(app: FastAPI, seed: bool = True) -> UserStore:
    """Create the application's user store and attach it to ``app.state``.

    Args:
        app: FastAPI application instance
        seed: Insert the fixed startup users

    Returns:
        The new store
    """
    store = InMemoryUserStore()
    if seed:
        store.seed(SEED_USERS)
    app.state.user_store = store
    logger.info("Initialized InMemoryUserStore with %d users", store.count())
    return store


def get_user_store(request: Request) -> UserStore:
    """Get the user store owned by the running application.

    Args:
        request: Incoming request

    Returns:
        UserStore instance
    """
    return request.app.state.user_store
