"""API models package."""

from user_api.models.health import HealthCheckResponse
from user_api.models.user import (
    ApiResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ApiResponse",
    "HealthCheckResponse",
    "UserCreateRequest",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
]
