"""Request and response models for the User API."""

from typing import Any, ClassVar

from pydantic import BaseModel, Field, StrictStr
from user_common.models.user import User


class UserCreateRequest(BaseModel):
    """Payload for creating a user. Presence is checked by the store."""

    name: StrictStr = ""
    email: StrictStr = ""

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "name": "Alice",
                "email": "alice@example.com",
            }
        }


class UserUpdateRequest(BaseModel):
    """Payload for renaming a user."""

    name: StrictStr = ""


class ApiResponse(BaseModel):
    """Envelope shared by every endpoint."""

    message: str
    data: Any = None


class UserResponse(ApiResponse):
    data: User


class UserListResponse(ApiResponse):
    data: list[User] = Field(default_factory=list)
