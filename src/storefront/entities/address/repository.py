"""Address repository."""

from src.storefront.entities._repository import SqlModelRepository, ilike_equals
from src.storefront.entities.address.entity import Address
from src.storefront.entities.address.table import AddressTable


class AddressRepository(SqlModelRepository[Address, AddressTable]):
    """Data-access layer for addresses."""

    entity_kind = "Address"
    entity_type = Address
    table_type = AddressTable

    def list_by_user(self, user_id: str) -> list[Address]:
        return self.list_where(user_id=user_id)

    def list_by_user_and_type(self, user_id: str, address_type: str) -> list[Address]:
        return self.list_where(
            ilike_equals(AddressTable.address_type, address_type), user_id=user_id
        )

    def list_defaults_for_user(self, user_id: str) -> list[Address]:
        """All addresses flagged default for the user; normally zero or one."""
        return self.list_where(user_id=user_id, is_default=True)

    def get_for_user(self, user_id: str, address_id: str) -> Address | None:
        return self.first_where(user_id=user_id, id=address_id)

    def list_by_city(self, city: str) -> list[Address]:
        return self.list_where(ilike_equals(AddressTable.city, city))

    def list_by_state(self, state: str) -> list[Address]:
        return self.list_where(ilike_equals(AddressTable.state, state))

    def list_by_country(self, country: str) -> list[Address]:
        return self.list_where(ilike_equals(AddressTable.country, country))

    def count_by_user(self, user_id: str) -> int:
        return self.count_where(user_id=user_id)
