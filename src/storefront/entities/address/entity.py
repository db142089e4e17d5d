"""Entity: Address."""

from typing import Any

from pydantic import Field

from src.storefront.entities._base import Entity


class Address(Entity):
    """Postal address owned by exactly one user.

    The owner is fixed at creation. For each user at most one address carries
    ``is_default = True``; ``DefaultAddressManager`` maintains that.
    """

    user_id: str = Field(description="Identifier of the owning user")
    street: str
    city: str
    state: str
    zip_code: str
    country: str
    address_type: str | None = Field(default=None, description="Free-form label, e.g. HOME or WORK")
    is_default: bool = False

    def __eq__(self, other: Any) -> bool:
        """Compare addresses by business attributes, ignoring timestamps."""
        if not isinstance(other, Address):
            return False

        return (
            self.id == other.id
            and self.user_id == other.user_id
            and self.street == other.street
            and self.city == other.city
            and self.state == other.state
            and self.zip_code == other.zip_code
            and self.country == other.country
            and self.address_type == other.address_type
            and self.is_default == other.is_default
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.user_id,
            self.street,
            self.zip_code,
            self.is_default,
        ))
