"""User entity package.

- User / UserRole: domain entity
- UserTable: database persistence model
- UserRepository: data access layer
- UserCreate / UserUpdate / UserResponse: API payloads
"""

from .entity import User, UserRole
from .repository import UserRepository
from .schemas import UserCreate, UserResponse, UserUpdate
from .table import UserTable

__all__ = [
    "User",
    "UserRole",
    "UserTable",
    "UserRepository",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
]
