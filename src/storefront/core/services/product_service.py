"""Product service."""

from decimal import Decimal

from loguru import logger
from sqlmodel import Session

from src.storefront.core.services.consistency import LookupResolver, UniquenessGuard
from src.storefront.core.services.database.unit_of_work import unit_of_work
from src.storefront.core.services.results import Result, ValidationFailure
from src.storefront.entities.product import (
    Product,
    ProductRepository,
    ProductRequest,
    ProductResponse,
)


def to_product_response(product: Product) -> ProductResponse:
    return ProductResponse.model_validate(product, from_attributes=True)


def _normalize_sku(sku: str | None) -> str | None:
    # An empty SKU means "no SKU" and must not occupy the unique index.
    return sku or None


class ProductService:
    """Catalogue operations.

    Product names are unique, SKUs are unique when present. Updates replace
    every field from the request except ``is_active``, which only changes when
    the request sets it; ``activate``/``deactivate`` toggle it directly.
    """

    def __init__(
        self,
        session: Session,
        products: ProductRepository,
        resolver: LookupResolver,
        guard: UniquenessGuard,
    ):
        self._session = session
        self._products = products
        self._resolver = resolver
        self._guard = guard

    def _responses(self, products: list[Product]) -> Result[list[ProductResponse]]:
        return Result.success([to_product_response(p) for p in products])

    @unit_of_work(read_only=True)
    def list_products(self) -> Result[list[ProductResponse]]:
        logger.debug("Fetching all products")
        return self._responses(self._products.list_all())

    @unit_of_work(read_only=True)
    def get_product(self, product_id: str) -> Result[ProductResponse]:
        logger.debug("Fetching product with id: {}", product_id)
        found = self._resolver.resolve(self._products, product_id)
        if not found.ok:
            return Result.failure(found.error)
        return Result.success(to_product_response(found.unwrap()))

    @unit_of_work(read_only=True)
    def get_by_name(self, name: str) -> Result[ProductResponse]:
        logger.debug("Fetching product with name: {}", name)
        found = self._resolver.resolve_by(self._products, "name", name)
        if not found.ok:
            return Result.failure(found.error)
        return Result.success(to_product_response(found.unwrap()))

    @unit_of_work(read_only=True)
    def get_by_sku(self, sku: str) -> Result[ProductResponse]:
        logger.debug("Fetching product with SKU: {}", sku)
        found = self._resolver.resolve_by(self._products, "sku", sku)
        if not found.ok:
            return Result.failure(found.error)
        return Result.success(to_product_response(found.unwrap()))

    @unit_of_work(read_only=True)
    def list_by_category(self, category: str) -> Result[list[ProductResponse]]:
        logger.debug("Fetching products with category: {}", category)
        return self._responses(self._products.list_by_category(category))

    @unit_of_work(read_only=True)
    def list_active(self) -> Result[list[ProductResponse]]:
        return self._responses(self._products.list_active())

    @unit_of_work(read_only=True)
    def list_in_stock(self) -> Result[list[ProductResponse]]:
        return self._responses(self._products.list_in_stock())

    @unit_of_work(read_only=True)
    def list_out_of_stock(self) -> Result[list[ProductResponse]]:
        return self._responses(self._products.list_out_of_stock())

    @unit_of_work(read_only=True)
    def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> Result[list[ProductResponse]]:
        """Active products priced within ``[min_price, max_price]``."""
        logger.debug("Fetching products within price range: {} - {}", min_price, max_price)
        if min_price > max_price:
            return Result.failure(
                ValidationFailure({"min_price": "must not be greater than max_price"})
            )
        return self._responses(self._products.list_by_price_range(min_price, max_price))

    @unit_of_work(read_only=True)
    def search(self, keyword: str) -> Result[list[ProductResponse]]:
        logger.debug("Searching products with keyword: {}", keyword)
        return self._responses(self._products.search_by_name(keyword))

    @unit_of_work()
    def create_product(self, request: ProductRequest) -> Result[ProductResponse]:
        logger.debug("Creating new product with name: {}", request.name)
        sku = _normalize_sku(request.sku)

        unique = self._guard.check_create(self._products, "name", request.name)
        if not unique.ok:
            return Result.failure(unique.error)
        unique = self._guard.check_create(self._products, "sku", sku, optional=True)
        if not unique.ok:
            return Result.failure(unique.error)

        product = Product(
            name=request.name,
            description=request.description,
            price=request.price,
            quantity=request.quantity,
            category=request.category,
            sku=sku,
            is_active=True if request.is_active is None else request.is_active,
        )
        saved = self._products.save(product)
        logger.info("Product created successfully with id: {}", saved.id)
        return Result.success(to_product_response(saved))

    @unit_of_work()
    def update_product(self, product_id: str, request: ProductRequest) -> Result[ProductResponse]:
        logger.debug("Updating product with id: {}", product_id)

        found = self._resolver.resolve(self._products, product_id)
        if not found.ok:
            return Result.failure(found.error)
        product = found.unwrap()
        sku = _normalize_sku(request.sku)

        unique = self._guard.check_update(self._products, "name", request.name, product.name)
        if not unique.ok:
            return Result.failure(unique.error)
        unique = self._guard.check_update(self._products, "sku", sku, product.sku, optional=True)
        if not unique.ok:
            return Result.failure(unique.error)

        replaced = product.model_copy(
            update={
                "name": request.name,
                "description": request.description,
                "price": request.price,
                "quantity": request.quantity,
                "category": request.category,
                "sku": sku,
                "is_active": product.is_active if request.is_active is None else request.is_active,
            }
        )
        saved = self._products.save(replaced)
        logger.info("Product updated successfully with id: {}", saved.id)
        return Result.success(to_product_response(saved))

    @unit_of_work()
    def delete_product(self, product_id: str) -> Result[None]:
        logger.debug("Deleting product with id: {}", product_id)
        found = self._resolver.resolve(self._products, product_id)
        if not found.ok:
            return Result.failure(found.error)

        self._products.delete(found.unwrap())
        logger.info("Product deleted successfully with id: {}", product_id)
        return Result.success(None)

    def _set_active(self, product_id: str, active: bool) -> Result[ProductResponse]:
        found = self._resolver.resolve(self._products, product_id)
        if not found.ok:
            return Result.failure(found.error)

        product = found.unwrap()
        product.is_active = active
        saved = self._products.save(product)
        logger.info("Product {} with id: {}", "activated" if active else "deactivated", product_id)
        return Result.success(to_product_response(saved))

    @unit_of_work()
    def deactivate(self, product_id: str) -> Result[ProductResponse]:
        """Soft delete: the product stays stored but drops out of active listings."""
        return self._set_active(product_id, False)

    @unit_of_work()
    def activate(self, product_id: str) -> Result[ProductResponse]:
        return self._set_active(product_id, True)

    @unit_of_work()
    def set_quantity(self, product_id: str, quantity: int) -> Result[ProductResponse]:
        logger.debug("Updating quantity for product id: {} to {}", product_id, quantity)
        found = self._resolver.resolve(self._products, product_id)
        if not found.ok:
            return Result.failure(found.error)

        product = found.unwrap()
        product.quantity = quantity
        saved = self._products.save(product)
        logger.info("Product quantity updated successfully with id: {}", product_id)
        return Result.success(to_product_response(saved))

    @unit_of_work(read_only=True)
    def count_products(self) -> Result[int]:
        return Result.success(self._products.count())

    @unit_of_work(read_only=True)
    def count_active(self) -> Result[int]:
        return Result.success(self._products.count_active())

    @unit_of_work(read_only=True)
    def count_by_category(self, category: str) -> Result[int]:
        return Result.success(self._products.count_by_category(category))

    @unit_of_work(read_only=True)
    def exists(self, product_id: str) -> Result[bool]:
        return Result.success(self._products.exists_by_field("id", product_id))
