"""
Adapter abstract base classes.

Every storage technology plugs into adminbro through a pair of classes:
a ``BaseDatabase`` subclass that recognizes a raw database handle and lists
its resources, and a ``BaseResource`` subclass that recognizes and wraps a
single raw collection/table. Records and properties are the values resources
hand back to the UI layer.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from adminbro.decorator import BaseDecorator
from adminbro.exceptions import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from adminbro.admin import AdminBro
    from adminbro.options import ResourceOptions

logger = logging.getLogger(__name__)

PROPERTY_TYPES = ("string", "number", "float", "boolean", "date", "datetime", "textarea", "object")


class BaseProperty:
    """Describes one field of a resource."""

    def __init__(
        self,
        path: str,
        type: str = "string",
        *,
        is_id: bool = False,
        is_title: bool = False,
        is_required: bool = False,
    ) -> None:
        if type not in PROPERTY_TYPES:
            raise ConfigurationError(f"Unsupported property type '{type}' for '{path}'")
        self._path = path
        self._type = type
        self._is_id = is_id
        self._is_title = is_title
        self._is_required = is_required

    def name(self) -> str:
        return self._path

    def path(self) -> str:
        return self._path

    def type(self) -> str:
        return self._type

    def is_id(self) -> bool:
        return self._is_id

    def is_title(self) -> bool:
        return self._is_title

    def is_required(self) -> bool:
        return self._is_required

    def is_editable(self) -> bool:
        """Ids are assigned by the storage and never edited through the UI."""
        return not self._is_id

    def to_json(self) -> dict[str, Any]:
        return {
            "path": self._path,
            "name": self.name(),
            "type": self._type,
            "is_id": self._is_id,
            "is_title": self._is_title,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r}, type={self._type!r})"


class BaseRecord:
    """
    A single row/document of a resource.

    Holds flat ``params`` and delegates persistence to its resource. Validation
    failures raised by the resource are captured in ``errors`` rather than
    propagated, so a form can be re-rendered with messages.
    """

    def __init__(self, params: dict[str, Any] | None, resource: BaseResource) -> None:
        self.params: dict[str, Any] = dict(params or {})
        self.resource = resource
        self.errors: dict[str, dict[str, Any]] = {}

    def param(self, path: str) -> Any:
        return self.params.get(path)

    def id(self) -> Any:
        id_property = self.resource.id_property()
        if id_property is None:
            return None
        return self.param(id_property.path())

    def title(self) -> str:
        title_property = self.resource.title_property()
        if title_property is None:
            return str(self.id())
        return str(self.param(title_property.path()))

    def is_valid(self) -> bool:
        return not self.errors

    def save(self) -> BaseRecord:
        """Create or update the record through its resource."""
        try:
            record_id = self.id()
            if record_id is None:
                self.params = self.resource.create(self.params)
            else:
                self.params = self.resource.update(record_id, self.params)
            self.errors = {}
        except ValidationError as e:
            logger.info(
                f"Validation failed for record in {self.resource.id()}",
                extra={"resource_id": self.resource.id(), "errors": e.property_errors},
            )
            self.errors = e.property_errors
        return self

    def update(self, params: dict[str, Any]) -> BaseRecord:
        """Apply ``params`` on top of current values and persist."""
        self.params = {**self.params, **params}
        return self.save()

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id(),
            "title": self.title(),
            "params": dict(self.params),
            "errors": dict(self.errors),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(resource={self.resource.id()!r}, id={self.id()!r})"


class BaseResource(ABC):
    """
    Abstract base class for resource adapters.

    A resource wraps one raw collection/table. Subclasses must implement
    ``is_adapter_for``, ``id`` and ``properties``; the CRUD methods raise
    ``NotImplementedError`` until an adapter provides them.
    """

    def __init__(self, raw: Any = None) -> None:
        self.raw = raw
        self.decorator: BaseDecorator | None = None

    @classmethod
    @abstractmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        """Return True if this class can wrap ``raw``."""

    @abstractmethod
    def id(self) -> str:
        """Unique identifier of the resource within one admin."""

    @abstractmethod
    def properties(self) -> list[BaseProperty]:
        """All properties of the resource, in display order."""

    def name(self) -> str:
        return self.id()

    def database_name(self) -> str:
        return "default"

    def database_type(self) -> str:
        return "other"

    def property(self, path: str) -> BaseProperty | None:
        return next((p for p in self.properties() if p.path() == path), None)

    def id_property(self) -> BaseProperty | None:
        return next((p for p in self.properties() if p.is_id()), None)

    def title_property(self) -> BaseProperty | None:
        props = self.properties()
        title = next((p for p in props if p.is_title()), None)
        if title is not None:
            return title
        return next((p for p in props if not p.is_id() and p.type() == "string"), None)

    def count(self, filters: dict[str, Any] | None = None) -> int:
        raise NotImplementedError(f"{type(self).__name__}.count")

    def find(
        self,
        filters: dict[str, Any] | None = None,
        *,
        limit: int = 10,
        offset: int = 0,
        sort: tuple[str, str] | None = None,
    ) -> list[BaseRecord]:
        raise NotImplementedError(f"{type(self).__name__}.find")

    def find_one(self, record_id: Any) -> BaseRecord | None:
        raise NotImplementedError(f"{type(self).__name__}.find_one")

    def create(self, params: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError(f"{type(self).__name__}.create")

    def update(self, record_id: Any, params: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError(f"{type(self).__name__}.update")

    def delete(self, record_id: Any) -> None:
        raise NotImplementedError(f"{type(self).__name__}.delete")

    def build_record(self, params: dict[str, Any]) -> BaseRecord:
        return BaseRecord(params, self)

    def assign_decorator(self, admin: AdminBro, options: ResourceOptions | None = None) -> None:
        """Attach the admin back-reference and user options to this resource."""
        self.decorator = BaseDecorator(self, admin, options)

    def decorate(self) -> BaseDecorator:
        if self.decorator is None:
            raise ConfigurationError(f"Resource '{self.id()}' has not been assigned to an admin")
        return self.decorator

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id()!r})"


class BaseDatabase(ABC):
    """Abstract base class for database adapters."""

    def __init__(self, raw: Any = None) -> None:
        self.raw = raw

    @classmethod
    @abstractmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        """Return True if this class can wrap the raw database handle."""

    @abstractmethod
    def resources(self) -> list[BaseResource]:
        """Wrap every collection/table of the database as a resource."""


__all__ = [
    "PROPERTY_TYPES",
    "BaseDatabase",
    "BaseProperty",
    "BaseRecord",
    "BaseResource",
]
