from fastapi import APIRouter, Query

from src.storefront.api.http.errors import ApiResponse

router = APIRouter(prefix="/api", tags=["greeting"])


@router.get("/hello", response_model=ApiResponse[dict[str, str]])
def hello():
    return ApiResponse(
        message="Welcome to User Management API",
        data={"message": "Hello World", "status": "Application is running"},
    )


@router.post("/greet", response_model=ApiResponse[dict[str, str]])
def greet(name: str = Query(min_length=1)):
    return ApiResponse(
        message="Greeting generated successfully",
        data={"greeting": f"Hello, {name}!"},
    )
