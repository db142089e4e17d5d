"""Unit tests for the default-address invariant."""

import pytest

from src.storefront.core.services.consistency import DefaultAddressManager, LookupResolver
from src.storefront.core.services.results import NotFound
from src.storefront.entities.address import Address, AddressRepository
from src.storefront.entities.user import User, UserRepository


@pytest.fixture
def manager(address_repository: AddressRepository) -> DefaultAddressManager:
    return DefaultAddressManager(address_repository, LookupResolver())


@pytest.fixture
def user(user_repository: UserRepository) -> User:
    return user_repository.save(User(name="John Doe", email="john.doe@example.com"))


@pytest.fixture
def add(address_repository: AddressRepository, user: User):
    def _add(street: str, is_default: bool = False, user_id: str | None = None) -> Address:
        return address_repository.save(
            Address(
                user_id=user_id or user.id,
                street=street,
                city="Los Angeles",
                state="CA",
                zip_code="90001",
                country="USA",
                is_default=is_default,
            )
        )

    return _add


def _defaults(repo: AddressRepository, user_id: str) -> list[str]:
    return [a.street for a in repo.list_defaults_for_user(user_id)]


class TestDefaultAddressManager:
    def test_unset_current_default(self, manager, address_repository, user, add):
        add("Home", is_default=True)

        assert manager.unset_current_default(user.id) == 1
        assert _defaults(address_repository, user.id) == []
        # Idempotent
        assert manager.unset_current_default(user.id) == 0

    def test_unset_keeps_requested_address(self, manager, address_repository, user, add):
        home = add("Home", is_default=True)

        assert manager.unset_current_default(user.id, keep=home.id) == 0
        assert _defaults(address_repository, user.id) == ["Home"]

    def test_unset_repairs_multiple_defaults(self, manager, address_repository, user, add):
        add("Home", is_default=True)
        work = add("Work", is_default=True)

        assert manager.unset_current_default(user.id, keep=work.id) == 1
        assert _defaults(address_repository, user.id) == ["Work"]

    def test_prepare_create_only_acts_when_default_requested(self, manager, address_repository, user, add):
        add("Home", is_default=True)

        manager.prepare_create(user.id, None)
        manager.prepare_create(user.id, False)
        assert _defaults(address_repository, user.id) == ["Home"]

        manager.prepare_create(user.id, True)
        assert _defaults(address_repository, user.id) == []

    def test_prepare_update_on_false_to_true(self, manager, address_repository, user, add):
        add("Home", is_default=True)
        work = add("Work")

        manager.prepare_update(work, True)

        assert _defaults(address_repository, user.id) == []

    def test_prepare_update_on_current_default_is_noop(self, manager, address_repository, user, add):
        home = add("Home", is_default=True)

        manager.prepare_update(home, True)

        assert _defaults(address_repository, user.id) == ["Home"]

    def test_defaults_of_other_users_untouched(self, manager, address_repository, user_repository, user, add):
        jane = user_repository.save(User(name="Jane Smith", email="jane.smith@example.com"))
        add("Jane Home", is_default=True, user_id=jane.id)
        add("Home", is_default=True)

        manager.unset_current_default(user.id)

        assert _defaults(address_repository, jane.id) == ["Jane Home"]

    def test_promote(self, manager, address_repository, user, add):
        add("Home", is_default=True)
        work = add("Work")

        promoted = manager.promote(work.id, user.id).unwrap()

        assert promoted.is_default
        assert _defaults(address_repository, user.id) == ["Work"]

    def test_promote_twice_is_idempotent(self, manager, address_repository, user, add):
        work = add("Work")

        first = manager.promote(work.id, user.id).unwrap()
        second = manager.promote(work.id, user.id).unwrap()

        assert first == second
        assert _defaults(address_repository, user.id) == ["Work"]

    def test_promote_foreign_address(self, manager, address_repository, user_repository, user, add):
        jane = user_repository.save(User(name="Jane Smith", email="jane.smith@example.com"))
        home = add("Home", is_default=True)
        jane_home = add("Jane Home", user_id=jane.id)

        result = manager.promote(jane_home.id, user.id)

        assert result.error == NotFound("Address", "id", jane_home.id)
        assert _defaults(address_repository, user.id) == [home.street]
