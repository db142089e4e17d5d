"""Address database table model."""

from sqlmodel import Field

from src.storefront.entities._base import EntityTable


class AddressTable(EntityTable, table=True):
    """Database persistence model for addresses."""

    __tablename__ = "addresses"

    user_id: str = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    street: str = Field(max_length=200)
    city: str = Field(max_length=100, index=True)
    state: str = Field(max_length=100)
    zip_code: str = Field(max_length=20)
    country: str = Field(max_length=100)
    address_type: str | None = Field(default=None, max_length=50)
    is_default: bool = Field(default=False)
