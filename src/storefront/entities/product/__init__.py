"""Entity package: Product."""

from .entity import Product
from .repository import ProductRepository
from .schemas import ProductRequest, ProductResponse
from .table import ProductTable

__all__ = [
    "Product",
    "ProductRepository",
    "ProductTable",
    "ProductRequest",
    "ProductResponse",
]
