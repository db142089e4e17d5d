"""User API router."""

from fastapi import APIRouter, Depends, Query, status

from src.storefront.api.http.deps import get_user_service
from src.storefront.api.http.errors import ApiResponse, ok
from src.storefront.core.services import UserService
from src.storefront.entities.user import UserCreate, UserResponse, UserRole, UserUpdate

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=ApiResponse[list[UserResponse]])
def list_users(service: UserService = Depends(get_user_service)):
    return ok("Users retrieved successfully", service.list_users())


@router.get("/count", response_model=ApiResponse[int])
def count_users(service: UserService = Depends(get_user_service)):
    return ok("User count retrieved successfully", service.count_users())


@router.get("/email/{email}", response_model=ApiResponse[UserResponse])
def get_user_by_email(email: str, service: UserService = Depends(get_user_service)):
    return ok("User retrieved successfully", service.get_user_by_email(email))


@router.get("/role/{role}", response_model=ApiResponse[list[UserResponse]])
def list_users_by_role(role: UserRole, service: UserService = Depends(get_user_service)):
    return ok("Users retrieved successfully", service.list_by_role(role))


@router.get("/search", response_model=ApiResponse[list[UserResponse]])
def search_users(
    name: str = Query(min_length=1),
    service: UserService = Depends(get_user_service),
):
    return ok("Search completed successfully", service.search_by_name(name))


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return ok("User retrieved successfully", service.get_user(user_id))


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
def create_user(request: UserCreate, service: UserService = Depends(get_user_service)):
    return ok("User created successfully", service.create_user(request))


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
def update_user(
    user_id: str,
    request: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    return ok("User updated successfully", service.update_user(user_id, request))


@router.delete("/{user_id}", response_model=ApiResponse[None])
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Delete a user together with all of their addresses."""
    return ok("User deleted successfully", service.delete_user(user_id))
