"""One transaction per public service operation."""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.storefront.core.services.results import Result, StorageFailure

F = TypeVar("F", bound=Callable[..., Result[Any]])


def _storage_failure(session: Session, operation: str, exc: SQLAlchemyError) -> Result[Any]:
    session.rollback()
    logger.error(
        "Database transaction failed",
        operation=operation,
        error_type=type(exc).__name__,
        error_message=str(exc),
    )
    return Result.failure(StorageFailure(operation, detail=type(exc).__name__))


def unit_of_work(*, read_only: bool = False) -> Callable[[F], F]:
    """Wrap a service method returning ``Result`` in a transaction.

    The method's owner must expose the SQLModel session as ``self._session``.
    A successful result is committed, a failed one is rolled back so that no
    step taken before the failure was detected survives, and any
    ``SQLAlchemyError`` is rolled back and returned as ``StorageFailure``.
    Read-only methods only get the error conversion.
    """

    def decorator(method: F) -> F:
        operation = method.__name__

        @wraps(method)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Result[Any]:
            session: Session = self._session
            try:
                result = method(self, *args, **kwargs)
            except SQLAlchemyError as exc:
                return _storage_failure(session, operation, exc)

            if read_only:
                return result

            if not result.ok:
                session.rollback()
                return result

            try:
                session.commit()
            except SQLAlchemyError as exc:
                return _storage_failure(session, operation, exc)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
