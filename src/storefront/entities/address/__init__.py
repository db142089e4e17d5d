"""Entity package: Address."""

from .entity import Address
from .repository import AddressRepository
from .schemas import AddressCreate, AddressResponse, AddressUpdate
from .table import AddressTable

__all__ = [
    "Address",
    "AddressRepository",
    "AddressTable",
    "AddressCreate",
    "AddressUpdate",
    "AddressResponse",
]
