"""
SQLAlchemy adapter.

Database handles are SQLAlchemy ``Engine`` objects; every reflected table
becomes a resource. Single tables can be listed explicitly with
``bind_table(table, engine)``.

Example:
    >>> engine = create_engine("sqlite:///blog.db")
    >>> registry.register(SQLAlchemyDatabase, SQLAlchemyResource)
    >>> admin = AdminBro({"databases": [engine]}, registry=registry)
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from adminbro.adapters.base import BaseDatabase, BaseProperty, BaseRecord, BaseResource
from adminbro.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


class TableBinding(NamedTuple):
    """A table together with the engine used to query it."""

    table: sa.Table
    engine: Engine


def bind_table(table: sa.Table, engine: Engine) -> TableBinding:
    return TableBinding(table=table, engine=engine)


def _property_type(column: sa.Column) -> str:
    column_type = column.type
    if isinstance(column_type, sa.Boolean):
        return "boolean"
    if isinstance(column_type, sa.Integer):
        return "number"
    if isinstance(column_type, sa.Float | sa.Numeric):
        return "float"
    if isinstance(column_type, sa.DateTime):
        return "datetime"
    if isinstance(column_type, sa.Date):
        return "date"
    if isinstance(column_type, sa.Text):
        return "textarea"
    if isinstance(column_type, sa.JSON):
        return "object"
    return "string"


class SQLAlchemyResource(BaseResource):
    """Resource adapter over one SQLAlchemy table."""

    raw: TableBinding

    @classmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        return isinstance(raw, TableBinding)

    @property
    def table(self) -> sa.Table:
        return self.raw.table

    @property
    def engine(self) -> Engine:
        return self.raw.engine

    def id(self) -> str:
        return self.table.name

    def database_name(self) -> str:
        return self.engine.url.database or self.engine.dialect.name

    def database_type(self) -> str:
        return self.engine.dialect.name

    def properties(self) -> list[BaseProperty]:
        return [
            BaseProperty(
                column.name,
                _property_type(column),
                is_id=column.primary_key,
                is_required=not column.nullable
                and not column.primary_key
                and column.default is None
                and column.server_default is None,
            )
            for column in self.table.columns
        ]

    def _primary_key(self) -> sa.Column:
        columns = list(self.table.primary_key.columns)
        if len(columns) != 1:
            raise ConfigurationError(
                f"Table '{self.table.name}' needs exactly one primary key column"
            )
        return columns[0]

    def _coerce_id(self, record_id: Any) -> Any:
        column = self._primary_key()
        try:
            return column.type.python_type(record_id)
        except (NotImplementedError, TypeError, ValueError):
            return record_id

    def _where(self, filters: dict[str, Any] | None) -> list[Any]:
        clauses = []
        for path, value in (filters or {}).items():
            if path not in self.table.c:
                raise ConfigurationError(f"Unknown filter '{path}' for '{self.id()}'")
            clauses.append(self.table.c[path] == value)
        return clauses

    def _values(self, params: dict[str, Any]) -> dict[str, Any]:
        unknown = sorted(set(params) - set(self.table.c.keys()))
        if unknown:
            raise ValidationError(
                {path: {"message": f"{path} is not a column of {self.id()}", "type": "unknown"} for path in unknown}
            )
        pk = self._primary_key().name
        return {key: value for key, value in params.items() if key != pk}

    def count(self, filters: dict[str, Any] | None = None) -> int:
        query = sa.select(sa.func.count()).select_from(self.table).where(*self._where(filters))
        with self.engine.connect() as conn:
            return conn.execute(query).scalar_one()

    def find(
        self,
        filters: dict[str, Any] | None = None,
        *,
        limit: int = 10,
        offset: int = 0,
        sort: tuple[str, str] | None = None,
    ) -> list[BaseRecord]:
        query = sa.select(self.table).where(*self._where(filters))
        if sort is not None:
            path, direction = sort
            column = self.table.c[path]
            query = query.order_by(column.desc() if direction == "desc" else column.asc())
        query = query.limit(limit).offset(offset)
        with self.engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [self.build_record(dict(row)) for row in rows]

    def find_one(self, record_id: Any) -> BaseRecord | None:
        pk = self._primary_key()
        query = sa.select(self.table).where(pk == self._coerce_id(record_id))
        with self.engine.connect() as conn:
            row = conn.execute(query).mappings().first()
        if row is None:
            return None
        return self.build_record(dict(row))

    def create(self, params: dict[str, Any]) -> dict[str, Any]:
        values = self._values(params)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(sa.insert(self.table).values(**values))
                record_id = result.inserted_primary_key[0]
        except IntegrityError as e:
            logger.info(f"Insert into {self.id()} rejected", extra={"resource_id": self.id()})
            raise ValidationError(base_error={"message": str(e.orig), "type": "integrity"}) from e
        record = self.find_one(record_id)
        return record.params if record is not None else {**values}

    def update(self, record_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        pk = self._primary_key()
        record_id = self._coerce_id(record_id)
        values = self._values(params)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(sa.update(self.table).where(pk == record_id).values(**values))
        except IntegrityError as e:
            raise ValidationError(base_error={"message": str(e.orig), "type": "integrity"}) from e
        if result.rowcount == 0:
            raise ValidationError(base_error={"message": f"Record {record_id} does not exist"})
        record = self.find_one(record_id)
        return record.params if record is not None else {}

    def delete(self, record_id: Any) -> None:
        pk = self._primary_key()
        with self.engine.begin() as conn:
            conn.execute(sa.delete(self.table).where(pk == self._coerce_id(record_id)))


class SQLAlchemyDatabase(BaseDatabase):
    """Database adapter over an ``Engine``; reflects all tables on construction."""

    raw: Engine

    def __init__(self, raw: Engine) -> None:
        super().__init__(raw)
        self.metadata = sa.MetaData()
        self.metadata.reflect(bind=raw)
        logger.debug(
            f"Reflected {len(self.metadata.tables)} tables",
            extra={"dialect": raw.dialect.name},
        )

    @classmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        return isinstance(raw, Engine)

    def resources(self) -> list[BaseResource]:
        return [
            SQLAlchemyResource(bind_table(table, self.raw))
            for table in self.metadata.sorted_tables
        ]


__all__ = [
    "SQLAlchemyDatabase",
    "SQLAlchemyResource",
    "TableBinding",
    "bind_table",
]
