"""Core services exports."""

# Database Service
from .database.db_session import DbSessionService

# Entity Services
from .address_service import AddressService
from .container import Services, build_services
from .product_service import ProductService
from .user_service import UserService

# Results
from .results import (
    DuplicateResource,
    ErrorCode,
    NotFound,
    Result,
    ResultError,
    ServiceError,
    StorageFailure,
    ValidationFailure,
)

__all__ = [
    # Database Service
    "DbSessionService",
    # Entity Services
    "AddressService",
    "ProductService",
    "Services",
    "UserService",
    "build_services",
    # Results
    "DuplicateResource",
    "ErrorCode",
    "NotFound",
    "Result",
    "ResultError",
    "ServiceError",
    "StorageFailure",
    "ValidationFailure",
]
