"""
adminbro.options - Admin Configuration

Typed option records for an admin instance and the merger that layers user
options over built-in defaults.

Every field has a default, so merging always yields a fully populated
``AdminOptions``. Keys may be given in snake_case or in the camelCase used
by the original JavaScript options (``rootPath``, ``companyName``...).

Example:
    >>> from adminbro.options import DEFAULT_OPTIONS, merge_options
    >>>
    >>> options = merge_options(DEFAULT_OPTIONS, {"branding": {"companyName": "Acme"}})
    >>> options.branding.company_name
    'Acme'
    >>> options.branding.logo == DEFAULT_OPTIONS.branding.logo
    True
"""

import copy
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from adminbro.dashboard import DefaultDashboard
from adminbro.exceptions import ConfigurationError

VIEWS = ("list", "show", "edit", "new")

DEFAULT_LOGO = "https://softwarebrothers.co/assets/images/software-brothers-logo-compact.svg"


class _Options(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        arbitrary_types_allowed=True,
    )


class ParentOptions(_Options):
    """Navigation group a resource is listed under."""

    name: str = Field(..., min_length=1)
    icon: str | None = None


class ActionOptions(_Options):
    """
    A resource action.

    ``enable`` is either a flag or the list of views the action is shown on.
    Setting it to ``False`` on a default action (``edit``, ``delete``...)
    removes that action.
    """

    id: str | None = None
    icon: str | None = None
    label: str | None = None
    enable: bool | list[str] = True
    handler: Callable[..., Any] | None = None

    @field_validator("enable")
    @classmethod
    def validate_enable(cls, v: bool | list[str]) -> bool | list[str]:
        if isinstance(v, list):
            unknown = [view for view in v if view not in VIEWS]
            if unknown:
                raise ValueError(f"Unknown views {unknown}; expected a subset of {list(VIEWS)}")
        return v


class ResourceOptions(_Options):
    """User settings attached to one explicitly listed resource."""

    name: str | None = None
    parent: ParentOptions | None = None
    list_properties: list[str] | None = None
    edit_properties: list[str] | None = None
    show_properties: list[str] | None = None
    actions: dict[str, ActionOptions] = Field(default_factory=dict)


class ResourceEntry(_Options):
    """A resource handle nested together with its options."""

    resource: Any
    options: ResourceOptions = Field(default_factory=ResourceOptions)


class BrandingOptions(_Options):
    logo: str = DEFAULT_LOGO
    company_name: str = "Company Name"
    show_vendor_badge: bool = True


class AssetsOptions(_Options):
    """Extra stylesheets and scripts linked from every page. Stored as tuples."""

    styles: tuple[str, ...] = ("/style.css",)
    scripts: tuple[str, ...] = ("/scripts.js",)


class AdminOptions(_Options):
    """
    Complete configuration of an admin instance.

    Sequence options are stored as tuples so a shared record such as
    ``DEFAULT_OPTIONS`` cannot be changed in place.

    Example:
        >>> AdminOptions(
        ...     root_path="/xyz-admin",
        ...     logout_path="/xyz-admin/exit",
        ...     login_path="/xyz-admin/sign-in",
        ...     databases=[connection],
        ...     resources=[{"resource": Article, "options": {"name": "Articles"}}],
        ...     branding={"company_name": "XYZ c.o."},
        ... )
    """

    root_path: str = "/admin"
    logout_path: str = "/admin/logout"
    login_path: str = "/admin/login"
    databases: tuple[Any, ...] = ()
    resources: tuple[Any, ...] = ()
    branding: BrandingOptions = Field(default_factory=BrandingOptions)
    dashboard: Any = DefaultDashboard
    assets: AssetsOptions = Field(default_factory=AssetsOptions)

    @field_validator("root_path", "logout_path", "login_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Paths are absolute and carry no trailing slash (except the root itself)."""
        if not v.startswith("/"):
            raise ValueError(f"Path must start with '/': {v!r}")
        return v.rstrip("/") or "/"

    @field_validator("resources", mode="before")
    @classmethod
    def coerce_resource_entries(cls, v: Any) -> Any:
        """Turn ``{"resource": ..., "options": ...}`` mappings into ResourceEntry."""
        if not isinstance(v, (list, tuple)):
            return v
        return [
            ResourceEntry.model_validate(item)
            if isinstance(item, Mapping) and "resource" in item
            else item
            for item in v
        ]


DEFAULT_OPTIONS = AdminOptions()


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge ``override`` into a copy of ``base``.

    Mappings merge key by key; lists and scalars from ``override`` replace the
    base value wholesale. Neither argument is mutated and the result shares no
    list or dict with ``base``.
    """
    merged = {key: _copy_container(value) for key, value in base.items()}
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = _copy_container(value)
    return merged


def _copy_container(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _copy_container(item) for key, item in value.items()}
    if isinstance(value, list):
        return copy.copy(value)
    return value


# Nested option records merged key by key; everything else is replaced.
_NESTED_FIELDS = {"branding", "assets"}


def _as_dict(options: AdminOptions) -> dict[str, Any]:
    return {
        name: _field_dict(getattr(options, name)) if name in _NESTED_FIELDS else getattr(options, name)
        for name in type(options).model_fields
    }


def _explicit_fields(options: AdminOptions) -> dict[str, Any]:
    """Only the fields the user actually set, recursing into nested records."""
    return {
        name: _field_dict(getattr(options, name), only_set=True)
        if name in _NESTED_FIELDS
        else getattr(options, name)
        for name in options.model_fields_set
    }


def _field_dict(model: BaseModel, only_set: bool = False) -> dict[str, Any]:
    names = model.model_fields_set if only_set else type(model).model_fields
    return {name: getattr(model, name) for name in names}


def parse_options(options: AdminOptions | Mapping[str, Any] | None) -> AdminOptions:
    """Validate raw user options, raising ConfigurationError on bad input."""
    if options is None:
        return AdminOptions()
    if isinstance(options, AdminOptions):
        return options
    try:
        return AdminOptions.model_validate(dict(options))
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid admin options: {e}") from e


def merge_options(
    defaults: AdminOptions,
    user_options: AdminOptions | Mapping[str, Any] | None = None,
) -> AdminOptions:
    """
    Layer user options over defaults.

    Parameters:
        defaults (AdminOptions): Base options; never mutated.
        user_options: Options given by the user as a record, a mapping or None.

    Returns:
        AdminOptions: A fresh, fully populated options record.

    Raises:
        ConfigurationError: If user options contain unknown keys or invalid values.
    """
    user = parse_options(user_options)
    merged = deep_merge(_as_dict(defaults), _explicit_fields(user))
    try:
        return AdminOptions.model_validate(merged)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid admin options: {e}") from e


__all__ = [
    "DEFAULT_OPTIONS",
    "VIEWS",
    "ActionOptions",
    "AdminOptions",
    "AssetsOptions",
    "BrandingOptions",
    "ParentOptions",
    "ResourceEntry",
    "ResourceOptions",
    "deep_merge",
    "merge_options",
    "parse_options",
]
