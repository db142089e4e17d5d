"""Unit tests for ProductService."""

from decimal import Decimal

from sqlalchemy.exc import OperationalError

from src.storefront.core.services import Services
from src.storefront.core.services.results import (
    DuplicateResource,
    ErrorCode,
    NotFound,
    StorageFailure,
)
from src.storefront.entities.product import ProductRequest


def _request(name: str = "Wireless Mouse", **overrides) -> ProductRequest:
    fields = {"price": Decimal("24.99"), "quantity": 10}
    fields.update(overrides)
    return ProductRequest(name=name, **fields)


class TestProductService:
    def test_create_is_active_by_default(self, services: Services):
        product = services.products.create_product(_request(sku="MOUSE-1")).unwrap()

        assert product.is_active
        assert product.sku == "MOUSE-1"
        assert product.price == Decimal("24.99")

    def test_duplicate_name(self, services: Services, create_product):
        create_product()

        result = services.products.create_product(_request())

        assert result.error == DuplicateResource("Product", "name", "Wireless Mouse")

    def test_duplicate_sku(self, services: Services, create_product):
        create_product(sku="MOUSE-1")

        result = services.products.create_product(_request("Other Mouse", sku="MOUSE-1"))

        assert result.error == DuplicateResource("Product", "sku", "MOUSE-1")
        assert services.products.count_products().unwrap() == 1

    def test_empty_skus_never_collide(self, services: Services, create_product):
        first = create_product(sku="")
        second = create_product("Keyboard", sku="")

        assert first.sku is None
        assert second.sku is None

    def test_update_replaces_fields_but_keeps_active_flag(self, services: Services, create_product):
        product = create_product(category="Electronics", sku="MOUSE-1")
        services.products.deactivate(product.id).unwrap()

        updated = services.products.update_product(
            product.id, _request("Wireless Mouse", price=Decimal("19.99"), quantity=3)
        ).unwrap()

        assert updated.price == Decimal("19.99")
        assert updated.quantity == 3
        assert updated.category is None
        assert updated.sku is None
        assert updated.is_active is False

    def test_update_sets_active_flag_when_given(self, services: Services, create_product):
        product = create_product()

        updated = services.products.update_product(product.id, _request(is_active=False)).unwrap()

        assert updated.is_active is False

    def test_update_to_another_products_name(self, services: Services, create_product):
        create_product()
        keyboard = create_product("Keyboard")

        result = services.products.update_product(keyboard.id, _request("Wireless Mouse"))

        assert result.error == DuplicateResource("Product", "name", "Wireless Mouse")
        assert services.products.get_product(keyboard.id).unwrap().name == "Keyboard"

    def test_activation_and_listings(self, services: Services, create_product):
        mouse = create_product()
        create_product("Keyboard", quantity=0)

        services.products.deactivate(mouse.id).unwrap()
        assert services.products.count_active().unwrap() == 1
        assert services.products.list_in_stock().unwrap() == []
        assert [p.name for p in services.products.list_out_of_stock().unwrap()] == ["Keyboard"]

        assert services.products.activate(mouse.id).unwrap().is_active
        assert [p.name for p in services.products.list_in_stock().unwrap()] == ["Wireless Mouse"]

    def test_set_quantity(self, services: Services, create_product):
        mouse = create_product()

        assert services.products.set_quantity(mouse.id, 0).unwrap().quantity == 0
        assert services.products.set_quantity("missing", 1).error == NotFound("Product", "id", "missing")

    def test_price_range(self, services: Services, create_product):
        create_product(price="10.00")
        create_product("Keyboard", price="50.00")

        found = services.products.list_by_price_range(Decimal("10.00"), Decimal("20.00")).unwrap()
        assert [p.name for p in found] == ["Wireless Mouse"]

        invalid = services.products.list_by_price_range(Decimal("20.00"), Decimal("10.00"))
        assert invalid.error.code == ErrorCode.VALIDATION_ERROR
        assert "min_price" in invalid.error.errors

    def test_lookups_and_counts(self, services: Services, create_product):
        create_product(category="Electronics", sku="MOUSE-1")

        assert services.products.get_by_name("Wireless Mouse").ok
        assert services.products.get_by_sku("MOUSE-1").ok
        assert services.products.get_by_sku("NOPE").error == NotFound("Product", "sku", "NOPE")
        assert services.products.count_by_category("electronics").unwrap() == 1
        assert len(services.products.search("mouse").unwrap()) == 1
        assert len(services.products.list_by_category("ELECTRONICS").unwrap()) == 1

    def test_delete(self, services: Services, create_product):
        mouse = create_product()

        assert services.products.delete_product(mouse.id).ok
        assert not services.products.exists(mouse.id).unwrap()
        assert services.products.delete_product(mouse.id).error == NotFound("Product", "id", mouse.id)

    def test_storage_error_becomes_storage_failure(self, services: Services, monkeypatch):
        def broken_save(entity):
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(services.products._products, "save", broken_save)

        result = services.products.create_product(_request())

        assert isinstance(result.error, StorageFailure)
        assert result.error.operation == "create_product"
        assert "disk" not in result.error.message
