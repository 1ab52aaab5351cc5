"""User models shared by the store and the API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="Unique identifier assigned by the store")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "John Doe",
                "email": "jhondoe@gmail.com",
            }
        }


class StoredUser(User):
    """User record as held by the store, including the soft-delete flag."""

    deleted: bool = Field(default=False, exclude=True)

    def to_user(self) -> User:
        """Return a detached public copy of this record."""
        return User(id=self.id, name=self.name, email=self.email)
