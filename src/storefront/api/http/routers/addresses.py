"""Address API router."""

from fastapi import APIRouter, Depends, status

from src.storefront.api.http.deps import get_address_service
from src.storefront.api.http.errors import ApiResponse, ok
from src.storefront.core.services import AddressService
from src.storefront.entities.address import AddressCreate, AddressResponse, AddressUpdate

router = APIRouter(prefix="/api/addresses", tags=["addresses"])

AddressList = ApiResponse[list[AddressResponse]]


@router.get("", response_model=AddressList)
def list_addresses(service: AddressService = Depends(get_address_service)):
    return ok("Addresses retrieved successfully", service.list_addresses())


@router.get("/user/{user_id}", response_model=AddressList)
def list_user_addresses(user_id: str, service: AddressService = Depends(get_address_service)):
    return ok("User addresses retrieved successfully", service.list_by_user(user_id))


@router.get("/user/{user_id}/type/{address_type}", response_model=AddressList)
def list_user_addresses_by_type(
    user_id: str,
    address_type: str,
    service: AddressService = Depends(get_address_service),
):
    return ok(
        "Addresses retrieved successfully",
        service.list_by_user_and_type(user_id, address_type),
    )


@router.get("/user/{user_id}/default", response_model=ApiResponse[AddressResponse])
def get_default_address(user_id: str, service: AddressService = Depends(get_address_service)):
    return ok("Default address retrieved successfully", service.get_default_for_user(user_id))


@router.get("/user/{user_id}/count", response_model=ApiResponse[int])
def count_user_addresses(user_id: str, service: AddressService = Depends(get_address_service)):
    return ok("Address count retrieved successfully", service.count_by_user(user_id))


@router.get("/city/{city}", response_model=AddressList)
def list_addresses_by_city(city: str, service: AddressService = Depends(get_address_service)):
    return ok("Addresses retrieved successfully", service.list_by_city(city))


@router.get("/state/{state}", response_model=AddressList)
def list_addresses_by_state(state: str, service: AddressService = Depends(get_address_service)):
    return ok("Addresses retrieved successfully", service.list_by_state(state))


@router.get("/country/{country}", response_model=AddressList)
def list_addresses_by_country(
    country: str, service: AddressService = Depends(get_address_service)
):
    return ok("Addresses retrieved successfully", service.list_by_country(country))


@router.get("/{address_id}", response_model=ApiResponse[AddressResponse])
def get_address(address_id: str, service: AddressService = Depends(get_address_service)):
    return ok("Address retrieved successfully", service.get_address(address_id))


@router.post("", response_model=ApiResponse[AddressResponse], status_code=status.HTTP_201_CREATED)
def create_address(
    request: AddressCreate, service: AddressService = Depends(get_address_service)
):
    """Add an address to an existing user; a default address demotes the previous one."""
    return ok("Address created successfully", service.create_address(request))


@router.put("/{address_id}", response_model=ApiResponse[AddressResponse])
@router.patch("/{address_id}", response_model=ApiResponse[AddressResponse])
def update_address(
    address_id: str,
    request: AddressUpdate,
    service: AddressService = Depends(get_address_service),
):
    return ok("Address updated successfully", service.update_address(address_id, request))


@router.patch(
    "/{address_id}/user/{user_id}/set-default",
    response_model=ApiResponse[AddressResponse],
)
def set_default_address(
    address_id: str,
    user_id: str,
    service: AddressService = Depends(get_address_service),
):
    return ok("Address set as default successfully", service.set_default(address_id, user_id))


@router.delete("/user/{user_id}", response_model=ApiResponse[None])
def delete_user_addresses(user_id: str, service: AddressService = Depends(get_address_service)):
    return ok("All user addresses deleted successfully", service.delete_all_for_user(user_id))


@router.delete("/{address_id}", response_model=ApiResponse[None])
def delete_address(address_id: str, service: AddressService = Depends(get_address_service)):
    return ok("Address deleted successfully", service.delete_address(address_id))
