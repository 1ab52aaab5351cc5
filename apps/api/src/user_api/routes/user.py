"""User API routes."""

import re

from fastapi import APIRouter, Depends, Query, status
from user_api.models.user import (
    ApiResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from user_api.services import get_user_store
from user_common.errors import InvalidInputError
from user_common.services.user_store import UserStore

router = APIRouter(tags=["users"])

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_user_id(raw: str | None) -> int:
    """Parse a user id given as text.

    Accepts a base-10 integer with an optional sign that fits in 64 bits.
    Negative ids parse fine; they simply never match a user.

    Args:
        raw: Id as received in the query string or path

    Returns:
        The parsed id

    Raises:
        InvalidInputError: If the id is missing or not numeric
    """
    if not raw:
        raise InvalidInputError("Invalid query params")
    if not _USER_ID_PATTERN.fullmatch(raw):
        raise InvalidInputError("Invalid id params")
    user_id = int(raw)
    if not _INT64_MIN <= user_id <= _INT64_MAX:
        raise InvalidInputError("Invalid id params")
    return user_id


def user_id_from_query(raw_id: str | None = Query(default=None, alias="id")) -> int:
    return parse_user_id(raw_id)


def user_id_from_path(user_id: str) -> int:
    return parse_user_id(user_id)


@router.get("/users", response_model=UserListResponse)
async def list_users(store: UserStore = Depends(get_user_store)) -> UserListResponse:
    return UserListResponse(message="Success get users", data=store.list_users())


@router.get("/user", response_model=UserResponse)
async def get_user(
    user_id: int = Depends(user_id_from_query),
    store: UserStore = Depends(get_user_store),
) -> UserResponse:
    return UserResponse(message="Success get user", data=store.get_user(user_id))


@router.post("/user", response_model=UserResponse)
async def add_user(payload: UserCreateRequest, store: UserStore = Depends(get_user_store)) -> UserResponse:
    user = store.add_user(payload.name, payload.email)
    return UserResponse(message="Success create user", data=user)


@router.put("/user/{user_id}", response_model=ApiResponse, status_code=status.HTTP_202_ACCEPTED)
async def update_user(
    payload: UserUpdateRequest,
    user_id: int = Depends(user_id_from_path),
    store: UserStore = Depends(get_user_store),
) -> ApiResponse:
    # The updated record is not echoed back.
    store.update_user(user_id, payload.name)
    return ApiResponse(message="Success update user")


@router.delete("/user/{user_id}", response_model=ApiResponse, status_code=status.HTTP_202_ACCEPTED)
async def delete_user(
    user_id: int = Depends(user_id_from_path),
    store: UserStore = Depends(get_user_store),
) -> ApiResponse:
    store.delete_user(user_id)
    return ApiResponse(message="Success delete user")
