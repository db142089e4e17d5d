"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.storefront.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    ``sku`` is nullable and unique: any number of products may have no SKU.
    """

    __tablename__ = "products"

    name: str = Field(max_length=100, unique=True, index=True)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    quantity: int = Field(default=0)
    category: str | None = Field(default=None, max_length=50, index=True)
    sku: str | None = Field(default=None, max_length=20, unique=True)
    is_active: bool = Field(default=True, index=True)
