"""
adminbro.exceptions - Custom exceptions for admin bootstrap

Provides a hierarchy of domain-specific exceptions raised while registering
adapters, merging options and building resources.

Example:
    >>> from adminbro.exceptions import NoAdapterError
    >>>
    >>> try:
    ...     admin = AdminBro({"databases": [connection]})
    ... except NoAdapterError as e:
    ...     logger.error(f"Failed to build admin: {e}")
"""

from typing import Any


class AdminBroError(Exception):
    """Base exception for all adminbro errors."""


class ConfigurationError(AdminBroError):
    """
    Raised when adminbro is configured incorrectly.

    This can occur due to:
    - Registering an adapter without a Database or Resource class
    - Registering adapter classes that lack ``is_adapter_for``
    - Unknown or invalid option values
    - Resource options referencing properties the resource does not have
    """


class NoAdapterError(AdminBroError):
    """
    Raised when no registered adapter recognizes a given handle.

    The offending handle is available as ``handle``.
    """

    kind = "handle"

    def __init__(self, handle: Any) -> None:
        self.handle = handle
        super().__init__(
            f"There are no adapters supporting one of the {self.kind}s: {handle!r}"
        )


class NoDatabaseAdapterError(NoAdapterError):
    """Raised when no adapter pair accepts a database handle."""

    kind = "database"


class NoResourceAdapterError(NoAdapterError):
    """Raised when no adapter pair accepts a resource handle."""

    kind = "resource"


class ValidationError(AdminBroError):
    """
    Raised by adapters when a record fails validation on create or update.

    Attributes:
        property_errors: Mapping of property path to ``{"message": ..., "type": ...}``
        base_error: Optional error not tied to a single property
    """

    def __init__(
        self,
        property_errors: dict[str, dict[str, Any]] | None = None,
        base_error: dict[str, Any] | None = None,
        message: str = "Resource cannot be stored because of validation errors",
    ) -> None:
        self.property_errors = property_errors or {}
        self.base_error = base_error
        super().__init__(message)


__all__ = [
    "AdminBroError",
    "ConfigurationError",
    "NoAdapterError",
    "NoDatabaseAdapterError",
    "NoResourceAdapterError",
    "ValidationError",
]
