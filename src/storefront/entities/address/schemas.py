"""Request and response models for addresses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

ZIP_CODE_PATTERN = r"^[0-9]{5,20}$"


class AddressCreate(BaseModel):
    """Payload for adding an address to an existing user."""

    user_id: str
    street: str = Field(min_length=1, max_length=200)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    zip_code: str = Field(pattern=ZIP_CODE_PATTERN)
    country: str = Field(min_length=1, max_length=100)
    address_type: str | None = Field(default=None, max_length=50)
    is_default: bool | None = None


class AddressUpdate(BaseModel):
    """Partial update; ``None`` fields keep their stored value.

    The owning user cannot be changed.
    """

    street: str | None = Field(default=None, min_length=1, max_length=200)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    state: str | None = Field(default=None, min_length=1, max_length=100)
    zip_code: str | None = Field(default=None, pattern=ZIP_CODE_PATTERN)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    address_type: str | None = Field(default=None, max_length=50)
    is_default: bool | None = None


class AddressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    user_name: str | None = None
    street: str
    city: str
    state: str
    zip_code: str
    country: str
    address_type: str | None = None
    is_default: bool
    created_at: datetime
    updated_at: datetime
