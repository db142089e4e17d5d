"""Typed outcomes returned by every service operation.

Operations never raise for expected conditions. They return a ``Result``
carrying either the value or exactly one of the failures below, and the HTTP
layer turns the failure into a response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(frozen=True)
class NotFound:
    """A referenced or targeted entity does not exist."""

    entity_kind: str
    field: str
    value: Any

    code = ErrorCode.NOT_FOUND

    @property
    def message(self) -> str:
        return f"{self.entity_kind} not found with {self.field}: '{self.value}'"


@dataclass(frozen=True)
class DuplicateResource:
    """Writing the value would break a uniqueness constraint."""

    entity_kind: str
    field: str
    value: Any

    code = ErrorCode.DUPLICATE_RESOURCE

    @property
    def message(self) -> str:
        return f"{self.entity_kind} already exists with {self.field}: '{self.value}'"


@dataclass(frozen=True)
class ValidationFailure:
    """Malformed input, keyed by field name."""

    errors: dict[str, str] = field(default_factory=dict)

    code = ErrorCode.VALIDATION_ERROR

    @property
    def message(self) -> str:
        return "Validation failed"


@dataclass(frozen=True)
class StorageFailure:
    """The store could not complete an operation.

    ``detail`` is for logs only and is never rendered to clients.
    """

    operation: str
    detail: str = ""

    code = ErrorCode.STORAGE_FAILURE

    @property
    def message(self) -> str:
        return f"Storage operation '{self.operation}' failed"


ServiceError = NotFound | DuplicateResource | ValidationFailure | StorageFailure


class ResultError(Exception):
    """Raised by ``Result.unwrap`` on a failed result."""

    def __init__(self, error: ServiceError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> Result[T]:
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise ResultError(self.error)
        return self.value  # type: ignore[return-value]
