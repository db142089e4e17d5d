"""Wires the services for one session."""

from dataclasses import dataclass

from sqlmodel import Session

from src.storefront.core.services.address_service import AddressService
from src.storefront.core.services.consistency import (
    DefaultAddressManager,
    LookupResolver,
    UniquenessGuard,
)
from src.storefront.core.services.product_service import ProductService
from src.storefront.core.services.user_service import UserService
from src.storefront.entities.address import AddressRepository
from src.storefront.entities.product import ProductRepository
from src.storefront.entities.user import UserRepository


@dataclass
class Services:
    users: UserService
    products: ProductService
    addresses: AddressService


def build_services(session: Session) -> Services:
    """Build the three services sharing ``session`` as their unit of work."""
    users = UserRepository(session)
    products = ProductRepository(session)
    addresses = AddressRepository(session)

    resolver = LookupResolver()
    guard = UniquenessGuard()
    defaults = DefaultAddressManager(addresses, resolver)

    return Services(
        users=UserService(session, users, addresses, resolver, guard),
        products=ProductService(session, products, resolver, guard),
        addresses=AddressService(session, addresses, users, resolver, defaults),
    )
