"""Entities grouped by business concept.

Each entity package holds:
- entity.py: domain model
- table.py: database persistence model
- repository.py: data access layer
- schemas.py: request/response payloads
"""

from .address import Address, AddressRepository, AddressTable
from .product import Product, ProductRepository, ProductTable
from .user import User, UserRepository, UserRole, UserTable

__all__ = [
    "User",
    "UserRole",
    "UserTable",
    "UserRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
    "Address",
    "AddressTable",
    "AddressRepository",
]
