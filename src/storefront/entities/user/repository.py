"""User repository."""

from collections.abc import Iterable

from sqlmodel import col

from src.storefront.entities._repository import SqlModelRepository, icontains
from src.storefront.entities.user.entity import User, UserRole
from src.storefront.entities.user.table import UserTable


class UserRepository(SqlModelRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_kind = "User"
    entity_type = User
    table_type = UserTable

    def list_by_role(self, role: UserRole) -> list[User]:
        return self.list_where(role=role)

    def search_by_name(self, name_part: str) -> list[User]:
        return self.list_where(icontains(UserTable.name, name_part))

    def names_by_id(self, user_ids: Iterable[str]) -> dict[str, str]:
        ids = set(user_ids)
        if not ids:
            return {}
        return {user.id: user.name for user in self.list_where(col(UserTable.id).in_(ids))}
