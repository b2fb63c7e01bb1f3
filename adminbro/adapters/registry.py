"""
Adapter Registry

Ordered registry of (Database, Resource) adapter pairs. Registration order
is match priority: when two pairs accept the same handle, the one registered
first wins.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from adminbro.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdapterPair:
    """A Database class and Resource class that together support one storage technology."""

    database: Any
    resource: Any

    @property
    def name(self) -> str:
        return f"{_kind_name(self.database)}/{_kind_name(self.resource)}"


def _kind_name(kind: Any) -> str:
    return getattr(kind, "__name__", type(kind).__name__)


def _has_predicate(kind: Any) -> bool:
    return callable(getattr(kind, "is_adapter_for", None))


class AdapterRegistry:
    """
    Registry of adapter pairs used by the resources factory.

    The registry only grows; there is no removal operation. Admins scan it
    when they are constructed, so adapters must be registered before the
    admin that needs them is built.

    Usage:
        registry = AdapterRegistry()
        registry.register(MemoryDatabase, MemoryResource)

        pair = registry.match_database(store)
    """

    def __init__(self) -> None:
        self._pairs: list[AdapterPair] = []

    def register(self, database: Any, resource: Any) -> AdapterPair:
        """
        Register an adapter pair.

        Parameters:
            database: Class (or any object with ``is_adapter_for``) wrapping raw database handles.
            resource: Class (or any object with ``is_adapter_for``) wrapping raw resource handles.

        Returns:
            AdapterPair: The registered pair.

        Raises:
            ConfigurationError: If either class is missing or lacks ``is_adapter_for``.
        """
        if database is None or resource is None:
            raise ConfigurationError("Adapter has to have both Database and Resource")

        if not (_has_predicate(database) and _has_predicate(resource)):
            raise ConfigurationError(
                "Adapter elements have to be subclasses of BaseDatabase and BaseResource"
            )

        pair = AdapterPair(database=database, resource=resource)
        logger.info(
            f"Registered adapter: {pair.name}",
            extra={"adapter": pair.name, "position": len(self._pairs)},
        )

        self._pairs.append(pair)
        return pair

    @property
    def pairs(self) -> tuple[AdapterPair, ...]:
        return tuple(self._pairs)

    def match_database(self, handle: Any) -> AdapterPair | None:
        """Return the first pair whose Database accepts ``handle``, or None."""
        for pair in self._pairs:
            if pair.database.is_adapter_for(handle):
                logger.debug(f"Database handle matched by {pair.name}")
                return pair
        return None

    def match_resource(self, handle: Any) -> AdapterPair | None:
        """Return the first pair whose Resource accepts ``handle``, or None."""
        for pair in self._pairs:
            if pair.resource.is_adapter_for(handle):
                logger.debug(f"Resource handle matched by {pair.name}")
                return pair
        return None

    def copy(self) -> "AdapterRegistry":
        clone = AdapterRegistry()
        clone._pairs = list(self._pairs)
        return clone

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[AdapterPair]:
        return iter(tuple(self._pairs))

    def __repr__(self) -> str:
        return f"AdapterRegistry(registered={len(self._pairs)})"


# Process-wide registry used by AdminBro.register_adapter
default_registry = AdapterRegistry()

__all__ = ["AdapterPair", "AdapterRegistry", "default_registry"]
