"""User database table model."""

from sqlmodel import Field

from src.storefront.entities._base import EntityTable
from src.storefront.entities.user.entity import UserRole


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    The unique index on ``email`` is the authority on email uniqueness; the
    service-level check only turns the common collision into a typed error.
    """

    __tablename__ = "users"

    name: str = Field(max_length=100)
    email: str = Field(max_length=255, unique=True, index=True)
    phone: str | None = Field(default=None, max_length=20)
    role: UserRole = Field(default=UserRole.CUSTOMER)
