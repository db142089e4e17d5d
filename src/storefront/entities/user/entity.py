"""User domain entity."""

from enum import Enum
from typing import Any

from pydantic import Field

from src.storefront.entities._base import Entity


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"


class User(Entity):
    """User entity representing a registered person.

    Email addresses are unique across all users; the service layer checks this
    before writing and the ``users`` table backs it with a unique index.
    """

    name: str = Field(description="User's display name")
    email: str = Field(description="User's email address, unique across users")
    phone: str | None = Field(default=None, description="User's phone number")
    role: UserRole = Field(default=UserRole.CUSTOMER, description="User's role")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
            and self.phone == other.phone
            and self.role == other.role
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.email,
            self.phone,
            self.role,
        ))
