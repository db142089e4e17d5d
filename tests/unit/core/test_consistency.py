"""Unit tests for the lookup resolver and the uniqueness guard."""

import pytest

from src.storefront.core.services.consistency import LookupResolver, UniquenessGuard
from src.storefront.core.services.results import DuplicateResource, ErrorCode, NotFound
from src.storefront.entities.address import Address, AddressRepository
from src.storefront.entities.product import ProductRepository
from src.storefront.entities.user import User, UserRepository


@pytest.fixture
def resolver() -> LookupResolver:
    return LookupResolver()


@pytest.fixture
def guard() -> UniquenessGuard:
    return UniquenessGuard()


@pytest.fixture
def john(user_repository: UserRepository) -> User:
    return user_repository.save(User(name="John Doe", email="john.doe@example.com"))


class TestLookupResolver:
    def test_resolve_existing(self, resolver: LookupResolver, user_repository: UserRepository, john: User):
        result = resolver.resolve(user_repository, john.id)

        assert result.ok
        assert result.unwrap() == john

    def test_resolve_missing(self, resolver: LookupResolver, user_repository: UserRepository):
        result = resolver.resolve(user_repository, "missing")

        assert not result.ok
        assert result.error == NotFound("User", "id", "missing")
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.error.message == "User not found with id: 'missing'"

    def test_resolve_by_field(self, resolver: LookupResolver, user_repository: UserRepository, john: User):
        assert resolver.resolve_by(user_repository, "email", "john.doe@example.com").unwrap() == john

        missing = resolver.resolve_by(user_repository, "email", "nobody@example.com")
        assert missing.error == NotFound("User", "email", "nobody@example.com")

    def test_require_exists(self, resolver: LookupResolver, user_repository: UserRepository, john: User):
        assert resolver.require_exists(user_repository, john.id).ok
        assert resolver.require_exists(user_repository, "missing").error == NotFound("User", "id", "missing")

    def test_owned_address_of_another_user_is_not_found(
        self,
        resolver: LookupResolver,
        user_repository: UserRepository,
        address_repository: AddressRepository,
        john: User,
    ):
        jane = user_repository.save(User(name="Jane Smith", email="jane.smith@example.com"))
        address = address_repository.save(
            Address(user_id=john.id, street="1 Road", city="Paris", state="IDF", zip_code="75001", country="France")
        )

        assert resolver.resolve_owned_address(address_repository, address.id, john.id).ok
        result = resolver.resolve_owned_address(address_repository, address.id, jane.id)
        assert result.error == NotFound("Address", "id", address.id)


class TestUniquenessGuard:
    def test_create_collision(self, guard: UniquenessGuard, user_repository: UserRepository, john: User):
        result = guard.check_create(user_repository, "email", "john.doe@example.com")

        assert result.error == DuplicateResource("User", "email", "john.doe@example.com")
        assert result.error.message == "User already exists with email: 'john.doe@example.com'"

    def test_create_free_value(self, guard: UniquenessGuard, user_repository: UserRepository, john: User):
        assert guard.check_create(user_repository, "email", "jane.smith@example.com").ok

    def test_update_keeping_own_value(self, guard: UniquenessGuard, user_repository: UserRepository, john: User):
        assert guard.check_update(user_repository, "email", john.email, john.email).ok

    def test_update_taking_another_value(
        self, guard: UniquenessGuard, user_repository: UserRepository, john: User
    ):
        jane = user_repository.save(User(name="Jane Smith", email="jane.smith@example.com"))

        result = guard.check_update(user_repository, "email", john.email, jane.email)
        assert result.error == DuplicateResource("User", "email", john.email)

    @pytest.mark.parametrize("blank", [None, ""])
    def test_optional_blank_values_skip_the_check(
        self, guard: UniquenessGuard, product_repository: ProductRepository, blank
    ):
        assert guard.check_create(product_repository, "sku", blank, optional=True).ok
        assert guard.check_update(product_repository, "sku", blank, "SKU-1", optional=True).ok
