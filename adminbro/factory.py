"""
Resources Factory

Turns the raw ``databases`` and ``resources`` given in admin options into
resource adapter instances, using the first matching pair of an
``AdapterRegistry``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from adminbro.adapters.base import BaseResource
from adminbro.adapters.registry import AdapterRegistry
from adminbro.exceptions import (
    ConfigurationError,
    NoDatabaseAdapterError,
    NoResourceAdapterError,
)
from adminbro.options import ResourceEntry, ResourceOptions

if TYPE_CHECKING:
    from adminbro.admin import AdminBro

logger = logging.getLogger(__name__)


class ResourcesFactory:
    """
    Builds the ordered resource list of one admin.

    Output order: resources of every database in database order, then the
    explicitly listed resources in listing order. Nothing is de-duplicated.

    With ``best_effort=True`` handles no adapter accepts are skipped with a
    warning instead of aborting the build.
    """

    def __init__(
        self,
        admin: AdminBro,
        registry: AdapterRegistry,
        *,
        best_effort: bool = False,
    ) -> None:
        self.admin = admin
        self.registry = registry
        self.best_effort = best_effort

    def build_resources(
        self,
        *,
        databases: Iterable[Any] = (),
        resources: Iterable[Any] = (),
    ) -> list[BaseResource]:
        """
        Resolve databases and resources into decorated resource instances.

        Returns:
            list[BaseResource]: Database-derived resources followed by explicit ones.

        Raises:
            NoDatabaseAdapterError: If no pair accepts a database (unless best-effort).
            NoResourceAdapterError: If no pair accepts a resource (unless best-effort).
            ConfigurationError: If resource options name properties the resource lacks.
        """
        db_resources = [(resource, None) for resource in self._convert_databases(databases)]
        option_resources = self._convert_resources(resources)

        built = []
        for resource, options in [*db_resources, *option_resources]:
            resource.assign_decorator(self.admin, options)
            resource.decorate().validate()
            built.append(resource)

        logger.info(
            f"Built {len(built)} resources",
            extra={
                "database_resources": len(db_resources),
                "explicit_resources": len(option_resources),
            },
        )
        return built

    def _convert_databases(self, databases: Iterable[Any]) -> list[BaseResource]:
        resources: list[BaseResource] = []
        for database in databases:
            pair = self.registry.match_database(database)
            if pair is None:
                if self.best_effort:
                    logger.warning(
                        f"Skipping database without adapter: {database!r}",
                        extra={"handle_type": type(database).__name__},
                    )
                    continue
                raise NoDatabaseAdapterError(database)
            resources.extend(pair.database(database).resources())
        return resources

    def _convert_resources(
        self, resources: Iterable[Any]
    ) -> list[tuple[BaseResource, ResourceOptions | None]]:
        converted = []
        for raw in resources:
            handle, options = _unwrap(raw)
            if isinstance(handle, BaseResource):
                converted.append((handle, options))
                continue

            pair = self.registry.match_resource(handle)
            if pair is None:
                if self.best_effort:
                    logger.warning(
                        f"Skipping resource without adapter: {handle!r}",
                        extra={"handle_type": type(handle).__name__},
                    )
                    continue
                raise NoResourceAdapterError(handle)
            converted.append((pair.resource(handle), options))
        return converted


def _unwrap(raw: Any) -> tuple[Any, ResourceOptions | None]:
    if isinstance(raw, ResourceEntry):
        return raw.resource, raw.options
    if isinstance(raw, Mapping) and "resource" in raw:
        try:
            entry = ResourceEntry.model_validate(dict(raw))
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid resource options: {e}") from e
        return entry.resource, entry.options
    return raw, None


__all__ = ["ResourcesFactory"]
