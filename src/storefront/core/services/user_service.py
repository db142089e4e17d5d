"""User service: registration, lookup, update and cascading delete."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.services.consistency import LookupResolver, UniquenessGuard
from src.storefront.core.services.database.unit_of_work import unit_of_work
from src.storefront.core.services.results import Result
from src.storefront.entities.address import AddressRepository
from src.storefront.entities.user import (
    User,
    UserCreate,
    UserRepository,
    UserResponse,
    UserRole,
    UserUpdate,
)


def to_user_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


class UserService:
    def __init__(
        self,
        session: Session,
        users: UserRepository,
        addresses: AddressRepository,
        resolver: LookupResolver,
        guard: UniquenessGuard,
    ):
        self._session = session
        self._users = users
        self._addresses = addresses
        self._resolver = resolver
        self._guard = guard

    @unit_of_work(read_only=True)
    def list_users(self) -> Result[list[UserResponse]]:
        logger.debug("Fetching all users")
        return Result.success([to_user_response(u) for u in self._users.list_all()])

    @unit_of_work(read_only=True)
    def get_user(self, user_id: str) -> Result[UserResponse]:
        logger.debug("Fetching user with id: {}", user_id)
        found = self._resolver.resolve(self._users, user_id)
        if not found.ok:
            return Result.failure(found.error)
        return Result.success(to_user_response(found.unwrap()))

    @unit_of_work(read_only=True)
    def get_user_by_email(self, email: str) -> Result[UserResponse]:
        logger.debug("Fetching user with email: {}", email)
        found = self._resolver.resolve_by(self._users, "email", email)
        if not found.ok:
            return Result.failure(found.error)
        return Result.success(to_user_response(found.unwrap()))

    @unit_of_work(read_only=True)
    def list_by_role(self, role: UserRole) -> Result[list[UserResponse]]:
        logger.debug("Fetching users with role: {}", role)
        return Result.success([to_user_response(u) for u in self._users.list_by_role(role)])

    @unit_of_work(read_only=True)
    def search_by_name(self, name_part: str) -> Result[list[UserResponse]]:
        logger.debug("Searching users with name containing: {}", name_part)
        return Result.success([to_user_response(u) for u in self._users.search_by_name(name_part)])

    @unit_of_work()
    def create_user(self, request: UserCreate) -> Result[UserResponse]:
        logger.debug("Creating new user with email: {}", request.email)

        unique = self._guard.check_create(self._users, "email", request.email)
        if not unique.ok:
            return Result.failure(unique.error)

        user = User(
            name=request.name,
            email=request.email,
            phone=request.phone,
            role=request.role or UserRole.CUSTOMER,
        )
        saved = self._users.save(user)
        logger.info("User created successfully with id: {}", saved.id)
        return Result.success(to_user_response(saved))

    @unit_of_work()
    def update_user(self, user_id: str, request: UserUpdate) -> Result[UserResponse]:
        """Apply the non-null fields of ``request``; the rest keep their values."""
        logger.debug("Updating user with id: {}", user_id)

        found = self._resolver.resolve(self._users, user_id)
        if not found.ok:
            return Result.failure(found.error)
        user = found.unwrap()

        if request.email is not None:
            unique = self._guard.check_update(self._users, "email", request.email, user.email)
            if not unique.ok:
                return Result.failure(unique.error)

        changes = request.model_dump(exclude_none=True)
        updated = user.model_copy(update=changes)
        saved = self._users.save(updated)
        logger.info("User updated successfully with id: {}", saved.id)
        return Result.success(to_user_response(saved))

    @unit_of_work()
    def delete_user(self, user_id: str) -> Result[None]:
        """Delete the user and every address it owns in one transaction."""
        logger.debug("Deleting user with id: {}", user_id)

        found = self._resolver.resolve(self._users, user_id)
        if not found.ok:
            return Result.failure(found.error)

        owned = self._addresses.list_by_user(user_id)
        for address in owned:
            self._addresses.delete(address)

        self._users.delete(found.unwrap())
        logger.info("User deleted successfully with id: {} ({} addresses removed)", user_id, len(owned))
        return Result.success(None)

    @unit_of_work(read_only=True)
    def count_users(self) -> Result[int]:
        return Result.success(self._users.count())

    @unit_of_work(read_only=True)
    def exists(self, user_id: str) -> Result[bool]:
        return Result.success(self._users.exists_by_field("id", user_id))
