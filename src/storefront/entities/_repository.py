"""Entity store contract and its SQLModel implementation.

Every entity package exposes a repository built on ``SqlModelRepository``.
The service layer only relies on the ``EntityStore`` protocol plus the named
filters each repository adds on top of it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from src.storefront.entities._base import Entity, EntityTable, utc_now

E = TypeVar("E", bound=Entity)
T = TypeVar("T", bound=EntityTable)


class EntityStore(Protocol[E]):
    """Storage operations the consistency layer depends on."""

    entity_kind: str

    def get(self, entity_id: str) -> E | None: ...

    def list_all(self) -> list[E]: ...

    def list_where(self, *criteria: ColumnElement[bool], **equals: Any) -> list[E]: ...

    def first_where(self, *criteria: ColumnElement[bool], **equals: Any) -> E | None: ...

    def exists_by_field(self, field: str, value: Any) -> bool: ...

    def count_where(self, *criteria: ColumnElement[bool], **equals: Any) -> int: ...

    def count(self) -> int: ...

    def save(self, entity: E) -> E: ...

    def delete(self, entity: E) -> None: ...


class SqlModelRepository(Generic[E, T]):
    """Data-access layer for one entity kind.

    Rows never leave the repository; callers receive pydantic entities.
    Writes are flushed straight away so later statements in the same
    transaction see them.
    """

    entity_kind: ClassVar[str]
    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: EntityTable) -> E:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _column(self, field: str) -> Any:
        column = getattr(self.table_type, field, None)
        if column is None:
            raise ValueError(f"{self.entity_kind} has no field '{field}'")
        return column

    def _filtered(self, statement: Any, criteria: Sequence[ColumnElement[bool]], equals: dict[str, Any]) -> Any:
        for field, value in equals.items():
            statement = statement.where(self._column(field) == value)
        for criterion in criteria:
            statement = statement.where(criterion)
        return statement

    def get(self, entity_id: str) -> E | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def list_all(self) -> list[E]:
        return self.list_where()

    def list_where(self, *criteria: ColumnElement[bool], **equals: Any) -> list[E]:
        statement = self._filtered(select(self.table_type), criteria, equals)
        statement = statement.order_by(self.table_type.created_at, self.table_type.id)
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]

    def first_where(self, *criteria: ColumnElement[bool], **equals: Any) -> E | None:
        statement = self._filtered(select(self.table_type), criteria, equals)
        row = self._session.exec(statement.limit(1)).first()
        if row is None:
            return None
        return self._to_entity(row)

    def exists_by_field(self, field: str, value: Any) -> bool:
        statement = select(self.table_type.id).where(self._column(field) == value).limit(1)
        return self._session.exec(statement).first() is not None

    def count_where(self, *criteria: ColumnElement[bool], **equals: Any) -> int:
        statement = self._filtered(
            select(func.count()).select_from(self.table_type), criteria, equals
        )
        return int(self._session.exec(statement).one())

    def count(self) -> int:
        return self.count_where()

    def save(self, entity: E) -> E:
        """Insert the entity when it has no stored row, otherwise replace every column."""
        row = self._session.get(self.table_type, entity.id) if entity.id else None
        data = entity.model_dump(exclude={"id", "created_at", "updated_at"})

        if row is None:
            row = self.table_type(**data)
            if entity.id:
                row.id = entity.id
            row.created_at = entity.created_at
        else:
            for field, value in data.items():
                setattr(row, field, value)

        row.updated_at = utc_now()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity: E) -> None:
        if entity.id is None:
            return
        row = self._session.get(self.table_type, entity.id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()


def ilike_equals(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive equality."""
    return func.lower(column) == value.lower()


def icontains(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive substring match."""
    return column.icontains(value, autoescape=True)
