"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.core.services import (
    AddressService,
    ProductService,
    Services,
    UserService,
    build_services,
)


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a session scoped to the request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_services(session: Session = Depends(get_db_session)) -> Services:
    return build_services(session)


def get_user_service(services: Services = Depends(get_services)) -> UserService:
    """Get the User service instance."""
    return services.users


def get_product_service(services: Services = Depends(get_services)) -> ProductService:
    """Get the Product service instance."""
    return services.products


def get_address_service(services: Services = Depends(get_services)) -> AddressService:
    """Get the Address service instance."""
    return services.addresses
