"""
adminbro.admin - Admin Instance

The ``AdminBro`` class takes admin options, merges them over defaults and
resolves every database and resource into adapter instances. The instance
is then handed to the router and every decorator as the shared context.

Example:
    >>> from adminbro import AdminBro
    >>> from adminbro.adapters.memory import MemoryDatabase, MemoryResource, MemoryStore
    >>>
    >>> AdminBro.register_adapter(MemoryDatabase, MemoryResource)
    >>>
    >>> store = MemoryStore("blog")
    >>> store.add_collection("articles", {"title": "string"}, title="title")
    >>>
    >>> admin = AdminBro({
    ...     "root_path": "/xyz-admin",
    ...     "databases": [store],
    ...     "branding": {"company_name": "XYZ c.o."},
    ... })
    >>> admin.find_resource("articles")
    MemoryResource(id='articles')
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from adminbro.adapters.base import BaseDatabase, BaseProperty, BaseRecord, BaseResource
from adminbro.adapters.registry import AdapterPair, AdapterRegistry, default_registry
from adminbro.dashboard import PageBuilder
from adminbro.decorator import BaseDecorator
from adminbro.exceptions import ValidationError
from adminbro.factory import ResourcesFactory
from adminbro.options import AdminOptions, merge_options
from adminbro.rendering import Renderer
from adminbro.settings import settings_defaults
from adminbro.version import VERSION

logger = logging.getLogger(__name__)


class AdminBro:
    """
    Main admin class.

    Construction is the only state transition: options are merged, resources
    built, and the instance is read-only afterwards. The admin keeps a snapshot
    of the registry it was built with, so adapters registered later do not
    affect it.

    Attributes:
        options: Effective options (defaults overlaid with user options)
        resources: Resolved resources, database-derived first
        dashboard: PageBuilder subclass rendered as the dashboard
    """

    VERSION = VERSION

    BaseDatabase = BaseDatabase
    BaseResource = BaseResource
    BaseRecord = BaseRecord
    BaseProperty = BaseProperty
    BaseDecorator = BaseDecorator
    PageBuilder = PageBuilder
    ValidationError = ValidationError

    def __init__(
        self,
        options: AdminOptions | Mapping[str, Any] | None = None,
        *,
        registry: AdapterRegistry | None = None,
        defaults: AdminOptions | None = None,
        best_effort: bool = False,
    ) -> None:
        """
        Build an admin from options.

        Parameters:
            options: User options as a record, a mapping or None.
            registry: Adapter registry to resolve handles with; the process-wide
                registry when omitted.
            defaults: Options the user options are layered over; environment
                settings over built-in defaults when omitted.
            best_effort: Skip handles no adapter accepts instead of failing.

        Raises:
            ConfigurationError: If options are invalid.
            NoAdapterError: If a database or resource has no adapter.
        """
        # Adapters registered after construction never reach this admin
        self.registry = (registry if registry is not None else default_registry).copy()
        self.options: AdminOptions = merge_options(
            defaults if defaults is not None else settings_defaults(), options
        )

        factory = ResourcesFactory(self, self.registry, best_effort=best_effort)
        self.resources: list[BaseResource] = factory.build_resources(
            databases=self.options.databases,
            resources=self.options.resources,
        )
        self.dashboard: type[PageBuilder] = self.options.dashboard

        logger.info(
            f"Admin mounted at {self.options.root_path}",
            extra={
                "root_path": self.options.root_path,
                "resource_count": len(self.resources),
                "adapter_count": len(self.registry),
            },
        )

    @classmethod
    def register_adapter(
        cls,
        database: type[BaseDatabase] | None,
        resource: type[BaseResource] | None,
        *,
        registry: AdapterRegistry | None = None,
    ) -> AdapterPair:
        """
        Register a database adapter written for adminbro.

        Parameters:
            database: Subclass of BaseDatabase.
            resource: Subclass of BaseResource.
            registry: Registry to add to; the process-wide one when omitted.

        Raises:
            ConfigurationError: If either class is missing or lacks ``is_adapter_for``.
        """
        target = registry if registry is not None else default_registry
        return target.register(database, resource)

    @staticmethod
    def render_login(action: str, error_message: str | None = None) -> str:
        """
        Render the login page with email and password fields.

        Parameters:
            action: Login form action url, e.g. ``/admin/login``.
            error_message: Optional message printed above the form.

        Returns:
            str: HTML of the rendered page.
        """
        return Renderer("pages/login", {"action": action, "error_message": error_message}).render()

    def render_dashboard(self) -> str:
        return self.dashboard(self).render()

    def find_resource(self, resource_id: str) -> BaseResource | None:
        """
        Return the resource whose ``id()`` equals ``resource_id``.

        When several resources share an id the first one in list order wins.
        Returns None for unknown ids.
        """
        return next((r for r in self.resources if r.id() == resource_id), None)

    def __repr__(self) -> str:
        return f"AdminBro(root_path={self.options.root_path!r}, resources={len(self.resources)})"


__all__ = ["AdminBro"]
