"""Request and response models for products."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

SKU_PATTERN = r"^[A-Z0-9-]*$"


class ProductRequest(BaseModel):
    """Payload for creating or replacing a product.

    On update every field is written as given except ``is_active``, which
    only changes when it is provided.
    """

    name: str = Field(min_length=3, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal = Field(ge=Decimal("0.01"), max_digits=10, decimal_places=2)
    quantity: int = Field(ge=0, le=999999)
    category: str | None = Field(default=None, max_length=50)
    sku: str | None = Field(default=None, max_length=20, pattern=SKU_PATTERN)
    is_active: bool | None = None


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    price: Decimal
    quantity: int
    category: str | None = None
    sku: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
