"""Request and response models for users."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.storefront.entities.user.entity import UserRole

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(BaseModel):
    """Payload for registering a user."""

    name: str = Field(min_length=2, max_length=100)
    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    phone: str | None = Field(default=None, max_length=20)
    role: UserRole | None = None


class UserUpdate(BaseModel):
    """Partial update; fields left as ``None`` keep their stored value."""

    name: str | None = Field(default=None, min_length=2, max_length=100)
    email: str | None = Field(default=None, max_length=255, pattern=EMAIL_PATTERN)
    phone: str | None = Field(default=None, max_length=20)
    role: UserRole | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    phone: str | None = None
    role: UserRole
    created_at: datetime
    updated_at: datetime
