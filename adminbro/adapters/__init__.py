"""
Adapters Layer - Storage Technologies

Each storage technology is supported by a (Database, Resource) pair of
classes registered in an ``AdapterRegistry``.

Bundled adapters:
- memory: dict-backed collections (``adminbro.adapters.memory``)
- sqlalchemy: reflected tables of an Engine (``adminbro.adapters.sqlalchemy``)

Usage:
    from adminbro.adapters import AdapterRegistry
    from adminbro.adapters.sqlalchemy import SQLAlchemyDatabase, SQLAlchemyResource

    registry = AdapterRegistry()
    registry.register(SQLAlchemyDatabase, SQLAlchemyResource)
"""

from adminbro.adapters.base import BaseDatabase, BaseProperty, BaseRecord, BaseResource
from adminbro.adapters.registry import AdapterPair, AdapterRegistry, default_registry

__all__ = [
    "AdapterPair",
    "AdapterRegistry",
    "BaseDatabase",
    "BaseProperty",
    "BaseRecord",
    "BaseResource",
    "default_registry",
]
