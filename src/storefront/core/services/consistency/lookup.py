"""Resolve-before-mutate lookups.

Every operation that names an entity by identity goes through here before it
writes anything, so a missing reference fails the whole operation with
``NotFound`` and leaves storage untouched.
"""

from typing import Any, TypeVar

from loguru import logger

from src.storefront.core.services.results import NotFound, Result
from src.storefront.entities._base import Entity
from src.storefront.entities._repository import EntityStore
from src.storefront.entities.address import Address, AddressRepository

E = TypeVar("E", bound=Entity)


class LookupResolver:
    def resolve(self, store: EntityStore[E], entity_id: str) -> Result[E]:
        entity = store.get(entity_id)
        if entity is None:
            logger.debug("{} {} not found", store.entity_kind, entity_id)
            return Result.failure(NotFound(store.entity_kind, "id", entity_id))
        return Result.success(entity)

    def resolve_by(self, store: EntityStore[E], field: str, value: Any) -> Result[E]:
        entity = store.first_where(**{field: value})
        if entity is None:
            logger.debug("{} with {}={} not found", store.entity_kind, field, value)
            return Result.failure(NotFound(store.entity_kind, field, value))
        return Result.success(entity)

    def require_exists(self, store: EntityStore[E], entity_id: str) -> Result[None]:
        if not store.exists_by_field("id", entity_id):
            return Result.failure(NotFound(store.entity_kind, "id", entity_id))
        return Result.success(None)

    def resolve_owned_address(
        self, addresses: AddressRepository, address_id: str, user_id: str
    ) -> Result[Address]:
        """Find an address only if it belongs to the given user."""
        address = addresses.get_for_user(user_id, address_id)
        if address is None:
            return Result.failure(NotFound(addresses.entity_kind, "id", address_id))
        return Result.success(address)
