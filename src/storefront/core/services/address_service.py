"""Address service.

Every write that can change a default flag goes through
``DefaultAddressManager`` so that a user never ends up with two default
addresses. The demotion of the previous default and the save of the new one
share the operation's transaction.
"""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.services.consistency import DefaultAddressManager, LookupResolver
from src.storefront.core.services.database.unit_of_work import unit_of_work
from src.storefront.core.services.results import NotFound, Result
from src.storefront.entities.address import (
    Address,
    AddressCreate,
    AddressRepository,
    AddressResponse,
    AddressUpdate,
)
from src.storefront.entities.user import UserRepository


def to_address_response(address: Address, user_name: str | None) -> AddressResponse:
    response = AddressResponse.model_validate(address, from_attributes=True)
    return response.model_copy(update={"user_name": user_name})


class AddressService:
    def __init__(
        self,
        session: Session,
        addresses: AddressRepository,
        users: UserRepository,
        resolver: LookupResolver,
        defaults: DefaultAddressManager,
    ):
        self._session = session
        self._addresses = addresses
        self._users = users
        self._resolver = resolver
        self._defaults = defaults

    def _to_response(self, address: Address) -> AddressResponse:
        names = self._users.names_by_id([address.user_id])
        return to_address_response(address, names.get(address.user_id))

    def _responses(self, addresses: list[Address]) -> Result[list[AddressResponse]]:
        names = self._users.names_by_id(a.user_id for a in addresses)
        return Result.success([to_address_response(a, names.get(a.user_id)) for a in addresses])

    @unit_of_work(read_only=True)
    def list_addresses(self) -> Result[list[AddressResponse]]:
        logger.debug("Fetching all addresses")
        return self._responses(self._addresses.list_all())

    @unit_of_work(read_only=True)
    def get_address(self, address_id: str) -> Result[AddressResponse]:
        logger.debug("Fetching address with id: {}", address_id)
        found = self._resolver.resolve(self._addresses, address_id)
        if not found.ok:
            return Result.failure(found.error)
        return Result.success(self._to_response(found.unwrap()))

    @unit_of_work(read_only=True)
    def list_by_user(self, user_id: str) -> Result[list[AddressResponse]]:
        """Addresses owned by the user; empty when the user has none or does not exist."""
        logger.debug("Fetching addresses for user id: {}", user_id)
        return self._responses(self._addresses.list_by_user(user_id))

    @unit_of_work(read_only=True)
    def list_by_user_and_type(self, user_id: str, address_type: str) -> Result[list[AddressResponse]]:
        logger.debug("Fetching addresses for user id: {} with type: {}", user_id, address_type)
        return self._responses(self._addresses.list_by_user_and_type(user_id, address_type))

    @unit_of_work(read_only=True)
    def get_default_for_user(self, user_id: str) -> Result[AddressResponse]:
        logger.debug("Fetching default address for user id: {}", user_id)
        defaults = self._addresses.list_defaults_for_user(user_id)
        if not defaults:
            return Result.failure(NotFound("Default address", "user_id", user_id))
        return Result.success(self._to_response(defaults[0]))

    @unit_of_work(read_only=True)
    def list_by_city(self, city: str) -> Result[list[AddressResponse]]:
        return self._responses(self._addresses.list_by_city(city))

    @unit_of_work(read_only=True)
    def list_by_state(self, state: str) -> Result[list[AddressResponse]]:
        return self._responses(self._addresses.list_by_state(state))

    @unit_of_work(read_only=True)
    def list_by_country(self, country: str) -> Result[list[AddressResponse]]:
        return self._responses(self._addresses.list_by_country(country))

    @unit_of_work(read_only=True)
    def count_by_user(self, user_id: str) -> Result[int]:
        return Result.success(self._addresses.count_by_user(user_id))

    @unit_of_work(read_only=True)
    def count_addresses(self) -> Result[int]:
        return Result.success(self._addresses.count())

    @unit_of_work()
    def create_address(self, request: AddressCreate) -> Result[AddressResponse]:
        logger.debug("Creating new address for user id: {}", request.user_id)

        owner = self._resolver.resolve(self._users, request.user_id)
        if not owner.ok:
            return Result.failure(owner.error)
        user = owner.unwrap()

        self._defaults.prepare_create(request.user_id, request.is_default)

        address = Address(
            user_id=request.user_id,
            street=request.street,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
            country=request.country,
            address_type=request.address_type,
            is_default=bool(request.is_default),
        )
        saved = self._addresses.save(address)
        logger.info("Address created successfully with id: {}", saved.id)
        return Result.success(to_address_response(saved, user.name))

    @unit_of_work()
    def update_address(self, address_id: str, request: AddressUpdate) -> Result[AddressResponse]:
        """Apply the non-null fields of ``request``; the owner never changes."""
        logger.debug("Updating address with id: {}", address_id)

        found = self._resolver.resolve(self._addresses, address_id)
        if not found.ok:
            return Result.failure(found.error)
        address = found.unwrap()

        self._defaults.prepare_update(address, request.is_default)

        updated = address.model_copy(update=request.model_dump(exclude_none=True))
        saved = self._addresses.save(updated)
        logger.info("Address updated successfully with id: {}", saved.id)
        return Result.success(self._to_response(saved))

    @unit_of_work()
    def set_default(self, address_id: str, user_id: str) -> Result[AddressResponse]:
        logger.debug("Setting address id: {} as default for user id: {}", address_id, user_id)

        promoted = self._defaults.promote(address_id, user_id)
        if not promoted.ok:
            return Result.failure(promoted.error)

        logger.info("Address id: {} set as default for user id: {}", address_id, user_id)
        return Result.success(self._to_response(promoted.unwrap()))

    @unit_of_work()
    def delete_address(self, address_id: str) -> Result[None]:
        logger.debug("Deleting address with id: {}", address_id)

        found = self._resolver.resolve(self._addresses, address_id)
        if not found.ok:
            return Result.failure(found.error)

        self._addresses.delete(found.unwrap())
        logger.info("Address deleted successfully with id: {}", address_id)
        return Result.success(None)

    @unit_of_work()
    def delete_all_for_user(self, user_id: str) -> Result[None]:
        logger.debug("Deleting all addresses for user id: {}", user_id)

        owner = self._resolver.require_exists(self._users, user_id)
        if not owner.ok:
            return owner

        owned = self._addresses.list_by_user(user_id)
        for address in owned:
            self._addresses.delete(address)
        logger.info("All addresses deleted for user id: {} ({} removed)", user_id, len(owned))
        return Result.success(None)
