"""
adminbro.settings - Environment Configuration

Server-level defaults loaded from .env files and environment variables using
pydantic-settings.

Settings hierarchy (highest wins):
    AdminBro(options)   (options given in code)
        |
    AdminBroSettings    (.env / ADMINBRO_* env vars)
        |
    DEFAULT_OPTIONS     (built-in defaults)

Usage:
    >>> from adminbro.settings import get_settings, settings_defaults
    >>> get_settings().root_path
    '/admin'
    >>> defaults = settings_defaults()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from adminbro.options import DEFAULT_OPTIONS, AdminOptions, merge_options

# Settings field -> (option field, nested field or None)
_OPTION_FIELDS: dict[str, tuple[str, str | None]] = {
    "root_path": ("root_path", None),
    "login_path": ("login_path", None),
    "logout_path": ("logout_path", None),
    "company_name": ("branding", "company_name"),
    "logo": ("branding", "logo"),
}


class AdminBroSettings(BaseSettings):
    """adminbro configuration loaded from .env / environment variables.

    All ADMINBRO_* prefixed env vars are loaded automatically.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ADMINBRO_",
        extra="ignore",
    )

    # -- Paths -----------------------------------------------------------------
    root_path: str = "/admin"
    login_path: str = "/admin/login"
    logout_path: str = "/admin/logout"

    # -- Branding --------------------------------------------------------------
    company_name: str = "Company Name"
    logo: str | None = None

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    def to_options(self) -> dict[str, Any]:
        """Option overrides for the fields explicitly set in the environment."""
        overrides: dict[str, Any] = {}
        for name in self.model_fields_set:
            if name not in _OPTION_FIELDS:
                continue
            field, nested = _OPTION_FIELDS[name]
            value = getattr(self, name)
            if nested is None:
                overrides[field] = value
            else:
                overrides.setdefault(field, {})[nested] = value
        return overrides


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_settings() -> AdminBroSettings:
    """Return the cached AdminBroSettings singleton."""
    return AdminBroSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()


def settings_defaults(settings: AdminBroSettings | None = None) -> AdminOptions:
    """Built-in defaults with environment overrides applied."""
    settings = settings or get_settings()
    return merge_options(DEFAULT_OPTIONS, settings.to_options())


def configure_logging(settings: AdminBroSettings | None = None) -> None:
    """Configure root logging for applications embedding adminbro."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


__all__ = [
    "AdminBroSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
    "settings_defaults",
]
