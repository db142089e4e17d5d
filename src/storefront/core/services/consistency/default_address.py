"""Maintains "at most one default address per user".

Each transition demotes the user's current default before the new default is
saved. The repository flushes every write, so inside one transaction the
demotion always reaches the database first, and the service layer commits
both or rolls both back. Demoting is idempotent: an address that is already
not default is left alone, and running the step again changes nothing.
"""

from loguru import logger

from src.storefront.core.services.consistency.lookup import LookupResolver
from src.storefront.core.services.results import Result
from src.storefront.entities.address import Address, AddressRepository


class DefaultAddressManager:
    def __init__(self, addresses: AddressRepository, resolver: LookupResolver) -> None:
        self._addresses = addresses
        self._resolver = resolver

    def unset_current_default(self, user_id: str, keep: str | None = None) -> int:
        """Demote every default address of the user except ``keep``.

        Returns how many rows were changed. More than one only happens when
        an earlier race left two defaults behind; this repairs it.
        """
        demoted = 0
        for address in self._addresses.list_defaults_for_user(user_id):
            if address.id == keep:
                continue
            address.is_default = False
            self._addresses.save(address)
            demoted += 1

        if demoted:
            logger.debug("Unset {} default address(es) for user id: {}", demoted, user_id)
        return demoted

    def prepare_create(self, user_id: str, wants_default: bool | None) -> None:
        """Run before saving a new address for ``user_id``."""
        if wants_default:
            self.unset_current_default(user_id)

    def prepare_update(self, address: Address, requested_default: bool | None) -> None:
        """Run before applying an update to ``address``.

        Only a false -> true transition touches other rows.
        """
        if requested_default and not address.is_default:
            self.unset_current_default(address.user_id, keep=address.id)

    def promote(self, address_id: str, user_id: str) -> Result[Address]:
        """Make an existing address the user's only default."""
        resolved = self._resolver.resolve_owned_address(self._addresses, address_id, user_id)
        if not resolved.ok:
            return resolved

        address = resolved.unwrap()
        self.unset_current_default(user_id, keep=address.id)
        if address.is_default:
            return Result.success(address)

        address.is_default = True
        return Result.success(self._addresses.save(address))
