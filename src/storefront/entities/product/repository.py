"""Product repository."""

from decimal import Decimal

from src.storefront.entities._repository import SqlModelRepository, icontains, ilike_equals
from src.storefront.entities.product.entity import Product
from src.storefront.entities.product.table import ProductTable


class ProductRepository(SqlModelRepository[Product, ProductTable]):
    """Data-access layer for products."""

    entity_kind = "Product"
    entity_type = Product
    table_type = ProductTable

    def list_by_category(self, category: str) -> list[Product]:
        return self.list_where(ilike_equals(ProductTable.category, category))

    def list_active(self) -> list[Product]:
        return self.list_where(is_active=True)

    def list_in_stock(self) -> list[Product]:
        return self.list_where(ProductTable.quantity > 0, is_active=True)

    def list_out_of_stock(self) -> list[Product]:
        return self.list_where(quantity=0, is_active=True)

    def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Product]:
        return self.list_where(
            ProductTable.price >= min_price,
            ProductTable.price <= max_price,
            is_active=True,
        )

    def search_by_name(self, keyword: str) -> list[Product]:
        return self.list_where(icontains(ProductTable.name, keyword))

    def count_active(self) -> int:
        return self.count_where(is_active=True)

    def count_by_category(self, category: str) -> int:
        return self.count_where(ilike_equals(ProductTable.category, category))
