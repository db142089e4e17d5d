"""Response envelopes and the mapping from service failures to HTTP."""

from datetime import datetime
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, Field

from src.storefront.core.services.results import ErrorCode, Result, ServiceError

T = TypeVar("T")

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.DUPLICATE_RESOURCE: 409,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.STORAGE_FAILURE: 503,
}


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: T | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str
    status: int
    timestamp: datetime = Field(default_factory=datetime.now)
    validation_errors: dict[str, str] | None = None


class ServiceFailureError(Exception):
    """Carries a failed result out of a route handler."""

    def __init__(self, error: ServiceError) -> None:
        super().__init__(error.message)
        self.error = error


def expect(result: Result[T]) -> T:
    """Return the result's value or abort the request with its failure."""
    if not result.ok:
        raise ServiceFailureError(result.error)  # type: ignore[arg-type]
    return result.value  # type: ignore[return-value]


def ok(message: str, result: Result[T]) -> ApiResponse[T]:
    return ApiResponse(message=message, data=expect(result))


def error_response(
    status: int,
    message: str,
    validation_errors: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error=HTTPStatus(status).phrase,
        status=status,
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status,
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def service_failure_handler(request: Request, exc: ServiceFailureError) -> JSONResponse:
    error = exc.error
    status = STATUS_BY_CODE[error.code]
    if status >= 500:
        logger.bind(error_code=error.code.value).error("Service failure: {}", error.message)
    else:
        logger.bind(error_code=error.code.value).info("Request rejected: {}", error.message)

    validation_errors = getattr(error, "errors", None) or None
    return error_response(status, error.message, validation_errors)


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {_field_name(tuple(e["loc"])): e["msg"] for e in exc.errors()}
    logger.bind(validation_errors=errors).info("Request validation failed")
    return error_response(422, "Validation failed", errors)
