"""
In-memory adapter.

Keeps rows as plain dicts inside named collections. Useful for prototyping
an admin before a real database is wired and as the reference
implementation of the adapter contract.

Example:
    >>> store = MemoryStore("blog")
    >>> store.add_collection("articles", {"title": "string", "views": "number"}, required=["title"])
    >>> registry.register(MemoryDatabase, MemoryResource)
    >>> admin = AdminBro({"databases": [store]}, registry=registry)
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

from adminbro.adapters.base import BaseDatabase, BaseProperty, BaseRecord, BaseResource
from adminbro.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


class MemoryCollection:
    """A named list of rows with a fixed set of fields."""

    def __init__(
        self,
        name: str,
        fields: dict[str, str],
        *,
        required: list[str] | None = None,
        title: str | None = None,
        database_name: str = "memory",
    ) -> None:
        if "id" in fields:
            raise ConfigurationError(f"Collection '{name}' must not declare an 'id' field")
        self.name = name
        self.fields = dict(fields)
        self.required = list(required or [])
        self.title = title
        self.database_name = database_name
        self.rows: dict[int, dict[str, Any]] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def __repr__(self) -> str:
        return f"MemoryCollection(name={self.name!r}, rows={len(self.rows)})"


class MemoryStore:
    """A named group of collections, playing the role of a database connection."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self.collections: dict[str, MemoryCollection] = {}

    def add_collection(
        self,
        name: str,
        fields: dict[str, str],
        *,
        required: list[str] | None = None,
        title: str | None = None,
    ) -> MemoryCollection:
        if name in self.collections:
            raise ConfigurationError(f"Collection '{name}' already exists in '{self.name}'")
        collection = MemoryCollection(
            name, fields, required=required, title=title, database_name=self.name
        )
        self.collections[name] = collection
        return collection

    def __repr__(self) -> str:
        return f"MemoryStore(name={self.name!r}, collections={list(self.collections)})"


def _matches(row: dict[str, Any], filters: dict[str, Any]) -> bool:
    return all(row.get(path) == value for path, value in filters.items())


class MemoryResource(BaseResource):
    """Resource adapter over a ``MemoryCollection``."""

    raw: MemoryCollection

    @classmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        return isinstance(raw, MemoryCollection)

    def id(self) -> str:
        return self.raw.name

    def database_name(self) -> str:
        return self.raw.database_name

    def database_type(self) -> str:
        return "memory"

    def properties(self) -> list[BaseProperty]:
        props = [BaseProperty("id", "number", is_id=True)]
        for path, type_ in self.raw.fields.items():
            props.append(
                BaseProperty(
                    path,
                    type_,
                    is_title=path == self.raw.title,
                    is_required=path in self.raw.required,
                )
            )
        return props

    def count(self, filters: dict[str, Any] | None = None) -> int:
        return sum(1 for row in self.raw.rows.values() if _matches(row, filters or {}))

    def find(
        self,
        filters: dict[str, Any] | None = None,
        *,
        limit: int = 10,
        offset: int = 0,
        sort: tuple[str, str] | None = None,
    ) -> list[BaseRecord]:
        rows = [row for row in self.raw.rows.values() if _matches(row, filters or {})]
        if sort is not None:
            path, direction = sort
            rows.sort(key=lambda row: (row.get(path) is None, row.get(path)), reverse=direction == "desc")
        return [self.build_record(row) for row in rows[offset : offset + limit]]

    def _coerce_id(self, record_id: Any) -> Any:
        try:
            return int(record_id)
        except (TypeError, ValueError):
            return record_id

    def find_one(self, record_id: Any) -> BaseRecord | None:
        row = self.raw.rows.get(self._coerce_id(record_id))
        if row is None:
            return None
        return self.build_record(row)

    def _validate(self, params: dict[str, Any]) -> dict[str, Any]:
        errors = {}
        for path in self.raw.required:
            if params.get(path) in (None, ""):
                errors[path] = {"message": f"{path} is required", "type": "required"}
        unknown = set(params) - set(self.raw.fields) - {"id"}
        for path in sorted(unknown):
            errors[path] = {"message": f"{path} is not a field of {self.id()}", "type": "unknown"}
        if errors:
            raise ValidationError(errors)
        return {path: params.get(path) for path in self.raw.fields}

    def create(self, params: dict[str, Any]) -> dict[str, Any]:
        values = self._validate(params)
        record_id = self.raw.next_id()
        row = {"id": record_id, **values}
        self.raw.rows[record_id] = row
        logger.debug(f"Created record {record_id} in {self.id()}")
        return dict(row)

    def update(self, record_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        record_id = self._coerce_id(record_id)
        if record_id not in self.raw.rows:
            raise ValidationError(base_error={"message": f"Record {record_id} does not exist"})
        merged = {**self.raw.rows[record_id], **params}
        values = self._validate(merged)
        row = {"id": record_id, **values}
        self.raw.rows[record_id] = row
        return dict(row)

    def delete(self, record_id: Any) -> None:
        self.raw.rows.pop(self._coerce_id(record_id), None)


class MemoryDatabase(BaseDatabase):
    """Database adapter over a ``MemoryStore``; one resource per collection."""

    raw: MemoryStore

    @classmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        return isinstance(raw, MemoryStore)

    def resources(self) -> list[BaseResource]:
        return [MemoryResource(collection) for collection in self.raw.collections.values()]


__all__ = ["MemoryCollection", "MemoryDatabase", "MemoryResource", "MemoryStore"]
