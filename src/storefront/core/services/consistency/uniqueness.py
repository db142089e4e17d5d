"""Pre-write uniqueness checks.

The check and the following save are separate statements, so two concurrent
writers can both pass it. The unique indexes on the tables stay the source of
truth; a lost race surfaces from the store as an integrity error, which the
service layer reports as ``StorageFailure``. This guard exists to give the
common collision a precise ``DuplicateResource`` before anything is written.
"""

from typing import Any

from loguru import logger

from src.storefront.core.services.results import DuplicateResource, Result
from src.storefront.entities._repository import EntityStore


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


class UniquenessGuard:
    def check_create(
        self,
        store: EntityStore[Any],
        field: str,
        value: Any,
        *,
        optional: bool = False,
    ) -> Result[None]:
        """Any stored row holding ``value`` is a collision.

        With ``optional=True`` a missing or empty value is never checked.
        """
        if optional and _is_blank(value):
            return Result.success(None)
        if store.exists_by_field(field, value):
            logger.info("Duplicate {} {}: {}", store.entity_kind, field, value)
            return Result.failure(DuplicateResource(store.entity_kind, field, value))
        return Result.success(None)

    def check_update(
        self,
        store: EntityStore[Any],
        field: str,
        new_value: Any,
        current_value: Any,
        *,
        optional: bool = False,
    ) -> Result[None]:
        """Like ``check_create``, but keeping the stored value never collides."""
        if new_value == current_value:
            return Result.success(None)
        return self.check_create(store, field, new_value, optional=optional)
