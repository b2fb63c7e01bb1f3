"""
adminbro - Auto-generated Admin Panels

Builds an administration panel from database adapters and resource
definitions.

This package provides:
1. An adapter registry third-party storage adapters plug into
2. A resources factory resolving databases/resources through the registry
3. Typed admin options merged over immutable defaults
4. Jinja2-rendered login and dashboard pages and a FastAPI router

Example:
    >>> from adminbro import AdminBro
    >>> from adminbro.adapters.sqlalchemy import SQLAlchemyDatabase, SQLAlchemyResource

    >>> AdminBro.register_adapter(SQLAlchemyDatabase, SQLAlchemyResource)
    >>> admin = AdminBro({"databases": [engine], "branding": {"company_name": "Acme"}})
    >>> admin.find_resource("articles")
"""

from adminbro.version import VERSION, __version__

__author__ = "adminbro contributors"
__license__ = "MIT"

from adminbro.adapters import (
    AdapterPair,
    AdapterRegistry,
    BaseDatabase,
    BaseProperty,
    BaseRecord,
    BaseResource,
    default_registry,
)
from adminbro.admin import AdminBro
from adminbro.dashboard import DefaultDashboard, PageBuilder
from adminbro.decorator import BaseDecorator
from adminbro.exceptions import (
    AdminBroError,
    ConfigurationError,
    NoAdapterError,
    NoDatabaseAdapterError,
    NoResourceAdapterError,
    ValidationError,
)
from adminbro.options import DEFAULT_OPTIONS, AdminOptions, ResourceEntry, ResourceOptions, merge_options
from adminbro.rendering import Renderer

__all__ = [
    "DEFAULT_OPTIONS",
    "VERSION",
    "AdapterPair",
    "AdapterRegistry",
    "AdminBro",
    "AdminBroError",
    "AdminOptions",
    "BaseDatabase",
    "BaseDecorator",
    "BaseProperty",
    "BaseRecord",
    "BaseResource",
    "ConfigurationError",
    "DefaultDashboard",
    "NoAdapterError",
    "NoDatabaseAdapterError",
    "NoResourceAdapterError",
    "PageBuilder",
    "Renderer",
    "ResourceEntry",
    "ResourceOptions",
    "ValidationError",
    "__version__",
    "default_registry",
    "merge_options",
]
