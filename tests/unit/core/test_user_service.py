"""Unit tests for UserService."""

from sqlalchemy.exc import OperationalError

from src.storefront.core.services import Services
from src.storefront.core.services.results import (
    DuplicateResource,
    ErrorCode,
    NotFound,
    StorageFailure,
)
from src.storefront.entities.user import UserCreate, UserRole, UserUpdate


class TestUserService:
    def test_create_defaults_role_to_customer(self, services: Services):
        user = services.users.create_user(UserCreate(name="John Doe", email="john.doe@example.com")).unwrap()

        assert user.id
        assert user.role == UserRole.CUSTOMER
        assert services.users.exists(user.id).unwrap()

    def test_create_duplicate_email(self, services: Services, create_user):
        create_user()

        result = services.users.create_user(UserCreate(name="Other", email="john.doe@example.com"))

        assert result.error == DuplicateResource("User", "email", "john.doe@example.com")
        assert services.users.count_users().unwrap() == 1

    def test_get_missing_user(self, services: Services):
        result = services.users.get_user("missing")

        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.error.message == "User not found with id: 'missing'"

    def test_get_by_email(self, services: Services, create_user):
        john = create_user()

        assert services.users.get_user_by_email("john.doe@example.com").unwrap() == john
        assert services.users.get_user_by_email("x@example.com").error == NotFound(
            "User", "email", "x@example.com"
        )

    def test_update_is_partial(self, services: Services, create_user):
        john = create_user(phone="1234567890")

        updated = services.users.update_user(john.id, UserUpdate(name="Johnny Doe")).unwrap()

        assert updated.name == "Johnny Doe"
        assert updated.email == john.email
        assert updated.phone == "1234567890"

    def test_update_keeping_own_email(self, services: Services, create_user):
        john = create_user()

        result = services.users.update_user(john.id, UserUpdate(email=john.email, role=UserRole.ADMIN))

        assert result.ok
        assert result.unwrap().role == UserRole.ADMIN

    def test_update_to_taken_email_changes_nothing(self, services: Services, create_user):
        john = create_user()
        jane = create_user(name="Jane Smith", email="jane.smith@example.com")

        result = services.users.update_user(jane.id, UserUpdate(name="Janet", email=john.email))

        assert result.error == DuplicateResource("User", "email", john.email)
        assert services.users.get_user(jane.id).unwrap().name == "Jane Smith"

    def test_update_missing_user(self, services: Services):
        result = services.users.update_user("missing", UserUpdate(name="Nobody"))

        assert result.error == NotFound("User", "id", "missing")

    def test_delete_cascades_to_addresses(self, services: Services, create_user, create_address):
        john = create_user()
        create_address(john.id, is_default=True)
        create_address(john.id, street="456 Business Blvd")

        assert services.users.delete_user(john.id).ok

        assert not services.users.exists(john.id).unwrap()
        assert services.addresses.list_by_user(john.id).unwrap() == []
        assert services.addresses.count_addresses().unwrap() == 0

    def test_delete_missing_user(self, services: Services, create_user):
        create_user()

        assert services.users.delete_user("missing").error == NotFound("User", "id", "missing")
        assert services.users.count_users().unwrap() == 1

    def test_role_and_search(self, services: Services, create_user):
        create_user(name="Admin User", email="admin@example.com", role=UserRole.ADMIN)
        create_user()

        admins = services.users.list_by_role(UserRole.ADMIN).unwrap()
        assert [u.email for u in admins] == ["admin@example.com"]
        assert len(services.users.search_by_name("USER").unwrap()) == 1
        assert len(services.users.list_users().unwrap()) == 2

    def test_delete_failure_keeps_addresses(
        self, services: Services, create_user, create_address, monkeypatch
    ):
        john = create_user()
        create_address(john.id, street="H", is_default=True)
        create_address(john.id, street="W")

        def broken_delete(entity):
            raise OperationalError("DELETE FROM users", {}, Exception("database is locked"))

        monkeypatch.setattr(services.users._users, "delete", broken_delete)

        result = services.users.delete_user(john.id)

        assert isinstance(result.error, StorageFailure)
        assert result.error.operation == "delete_user"
        assert services.users.exists(john.id).unwrap()
        remaining = services.addresses.list_by_user(john.id).unwrap()
        assert {a.street: a.is_default for a in remaining} == {"H": True, "W": False}
