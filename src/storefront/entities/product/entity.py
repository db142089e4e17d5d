"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.storefront.entities._base import Entity


class Product(Entity):
    """Product entity representing an item in the catalogue.

    ``name`` is unique, ``sku`` is unique when present. Deactivating a product
    keeps the row and hides it from the active, stock and price listings.
    """

    name: str = Field(description="Product name, unique across products")
    description: str | None = Field(default=None)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    quantity: int = Field(ge=0)
    category: str | None = Field(default=None)
    sku: str | None = Field(default=None, description="Stock keeping unit, unique when set")
    is_active: bool = Field(default=True)

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.quantity == other.quantity
            and self.category == other.category
            and self.sku == other.sku
            and self.is_active == other.is_active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.price,
            self.quantity,
            self.sku,
            self.is_active,
        ))
