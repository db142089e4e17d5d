"""Product API router."""

from decimal import Decimal

from fastapi import APIRouter, Depends, Query, status

from src.storefront.api.http.deps import get_product_service
from src.storefront.api.http.errors import ApiResponse, ok
from src.storefront.core.services import ProductService
from src.storefront.entities.product import ProductRequest, ProductResponse

router = APIRouter(prefix="/api/products", tags=["products"])

ProductList = ApiResponse[list[ProductResponse]]


@router.get("", response_model=ProductList)
def list_products(service: ProductService = Depends(get_product_service)):
    return ok("Products retrieved successfully", service.list_products())


@router.get("/count", response_model=ApiResponse[int])
def count_products(service: ProductService = Depends(get_product_service)):
    return ok("Product count retrieved successfully", service.count_products())


@router.get("/count/active", response_model=ApiResponse[int])
def count_active_products(service: ProductService = Depends(get_product_service)):
    return ok("Active product count retrieved successfully", service.count_active())


@router.get("/count/category/{category}", response_model=ApiResponse[int])
def count_products_by_category(
    category: str, service: ProductService = Depends(get_product_service)
):
    return ok(
        "Product count by category retrieved successfully",
        service.count_by_category(category),
    )


@router.get("/name/{name}", response_model=ApiResponse[ProductResponse])
def get_product_by_name(name: str, service: ProductService = Depends(get_product_service)):
    return ok("Product retrieved successfully", service.get_by_name(name))


@router.get("/sku/{sku}", response_model=ApiResponse[ProductResponse])
def get_product_by_sku(sku: str, service: ProductService = Depends(get_product_service)):
    return ok("Product retrieved successfully", service.get_by_sku(sku))


@router.get("/category/{category}", response_model=ProductList)
def list_products_by_category(
    category: str, service: ProductService = Depends(get_product_service)
):
    return ok("Products retrieved successfully", service.list_by_category(category))


@router.get("/active", response_model=ProductList)
def list_active_products(service: ProductService = Depends(get_product_service)):
    return ok("Active products retrieved successfully", service.list_active())


@router.get("/in-stock", response_model=ProductList)
def list_in_stock_products(service: ProductService = Depends(get_product_service)):
    return ok("In-stock products retrieved successfully", service.list_in_stock())


@router.get("/out-of-stock", response_model=ProductList)
def list_out_of_stock_products(service: ProductService = Depends(get_product_service)):
    return ok("Out-of-stock products retrieved successfully", service.list_out_of_stock())


@router.get("/price-range", response_model=ProductList)
def list_products_by_price_range(
    min_price: Decimal = Query(ge=0),
    max_price: Decimal = Query(ge=0),
    service: ProductService = Depends(get_product_service),
):
    return ok(
        "Products retrieved successfully",
        service.list_by_price_range(min_price, max_price),
    )


@router.get("/search", response_model=ProductList)
def search_products(
    keyword: str = Query(min_length=1),
    service: ProductService = Depends(get_product_service),
):
    return ok("Search completed successfully", service.search(keyword))


@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return ok("Product retrieved successfully", service.get_product(product_id))


@router.post("", response_model=ApiResponse[ProductResponse], status_code=status.HTTP_201_CREATED)
def create_product(
    request: ProductRequest, service: ProductService = Depends(get_product_service)
):
    return ok("Product created successfully", service.create_product(request))


@router.put("/{product_id}", response_model=ApiResponse[ProductResponse])
def update_product(
    product_id: str,
    request: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    return ok("Product updated successfully", service.update_product(product_id, request))


@router.delete("/{product_id}", response_model=ApiResponse[None])
def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return ok("Product deleted successfully", service.delete_product(product_id))


@router.patch("/{product_id}/deactivate", response_model=ApiResponse[ProductResponse])
def deactivate_product(
    product_id: str, service: ProductService = Depends(get_product_service)
):
    return ok("Product deactivated successfully", service.deactivate(product_id))


@router.patch("/{product_id}/activate", response_model=ApiResponse[ProductResponse])
def activate_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return ok("Product activated successfully", service.activate(product_id))


@router.patch("/{product_id}/quantity", response_model=ApiResponse[ProductResponse])
def update_product_quantity(
    product_id: str,
    quantity: int = Query(ge=0, le=999999),
    service: ProductService = Depends(get_product_service),
):
    return ok(
        "Product quantity updated successfully",
        service.set_quantity(product_id, quantity),
    )
