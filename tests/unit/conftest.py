"""
Shared fixtures for adminbro unit tests.

Provides fake document-store adapters, isolated registries and a cleared
settings environment so tests never touch the process-wide registry.
"""

import os
from typing import Any

import pytest

from adminbro.adapters.base import BaseDatabase, BaseProperty, BaseResource
from adminbro.adapters.memory import MemoryDatabase, MemoryResource, MemoryStore
from adminbro.adapters.registry import AdapterRegistry
from adminbro.settings import clear_settings_cache


class MongoResource(BaseResource):
    """Fake collection adapter recognizing ``{"type": "mongo", "name": ...}``."""

    @classmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        return isinstance(raw, dict) and raw.get("type") == "mongo" and "name" in raw

    def id(self) -> str:
        return self.raw["name"]

    def database_name(self) -> str:
        return self.raw.get("database", "test")

    def database_type(self) -> str:
        return "mongo"

    def properties(self) -> list[BaseProperty]:
        return [
            BaseProperty("_id", "string", is_id=True),
            BaseProperty("name", "string", is_title=True),
            BaseProperty("email", "string"),
        ]


class MongoDatabase(BaseDatabase):
    """Fake connection adapter; yields one resource per listed collection."""

    @classmethod
    def is_adapter_for(cls, raw: Any) -> bool:
        return isinstance(raw, dict) and raw.get("type") == "mongo" and "name" not in raw

    def resources(self) -> list[BaseResource]:
        return [
            MongoResource({"type": "mongo", "name": name})
            for name in self.raw.get("collections", ["users"])
        ]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Strip ADMINBRO_* env vars, hide any .env file and reset the settings cache."""
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    for key in list(os.environ):
        if key.startswith("ADMINBRO_"):
            monkeypatch.delenv(key, raising=False)
    yield
    clear_settings_cache()


@pytest.fixture
def registry() -> AdapterRegistry:
    """Empty registry private to one test."""
    return AdapterRegistry()


@pytest.fixture
def mongo_registry(registry: AdapterRegistry) -> AdapterRegistry:
    registry.register(MongoDatabase, MongoResource)
    return registry


@pytest.fixture
def memory_registry(registry: AdapterRegistry) -> AdapterRegistry:
    registry.register(MemoryDatabase, MemoryResource)
    return registry


@pytest.fixture
def blog_store() -> MemoryStore:
    """Memory store with articles and comments collections."""
    store = MemoryStore("blog")
    store.add_collection(
        "articles",
        {"title": "string", "content": "textarea", "views": "number", "published": "boolean"},
        required=["title"],
        title="title",
    )
    store.add_collection("comments", {"body": "string", "article_id": "number"})
    return store


@pytest.fixture
def mongo_kinds() -> tuple[type[MongoDatabase], type[MongoResource]]:
    return MongoDatabase, MongoResource
