"""
Resource decorator.

Combines what an adapter knows about a resource (name, database, properties)
with the options the user attached to it, producing the values the UI layer
renders: display name, navigation parent, visible properties per view and
available actions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from adminbro.exceptions import ConfigurationError
from adminbro.options import ActionOptions, ResourceOptions

if TYPE_CHECKING:
    from adminbro.adapters.base import BaseProperty, BaseResource
    from adminbro.admin import AdminBro

logger = logging.getLogger(__name__)

DEFAULT_MAX_LIST_PROPERTIES = 5


def default_actions() -> dict[str, ActionOptions]:
    return {
        "new": ActionOptions(id="new", icon="icon-add", label="Add new", enable=["list"]),
        "edit": ActionOptions(id="edit", icon="icon-edit", label="Edit", enable=["list", "show"]),
        "show": ActionOptions(id="show", icon="icon-view", label="Info", enable=["list", "edit"]),
        "delete": ActionOptions(
            id="delete", icon="icon-trash", label="Remove", enable=["list", "show", "edit"]
        ),
    }


class BaseDecorator:
    """Decorated view of a resource inside one admin."""

    def __init__(
        self,
        resource: BaseResource,
        admin: AdminBro,
        options: ResourceOptions | None = None,
    ) -> None:
        self.resource = resource
        self.admin = admin
        self.options = options or ResourceOptions()

    def get_resource_name(self) -> str:
        return self.options.name or self.resource.name()

    def get_parent(self) -> dict[str, Any]:
        if self.options.parent is not None:
            return {"name": self.options.parent.name, "icon": self.options.parent.icon}
        return {
            "name": self.resource.database_name(),
            "icon": f"icon-{self.resource.database_type()}",
        }

    def _resolve(self, paths: list[str] | None, default: list[BaseProperty]) -> list[BaseProperty]:
        if paths is None:
            return default
        resolved = []
        for path in paths:
            prop = self.resource.property(path)
            if prop is None:
                raise ConfigurationError(
                    f"Resource '{self.resource.id()}' has no property '{path}'"
                )
            resolved.append(prop)
        return resolved

    def get_list_properties(self) -> list[BaseProperty]:
        return self._resolve(
            self.options.list_properties,
            self.resource.properties()[:DEFAULT_MAX_LIST_PROPERTIES],
        )

    def get_show_properties(self) -> list[BaseProperty]:
        return self._resolve(self.options.show_properties, self.resource.properties())

    def get_edit_properties(self) -> list[BaseProperty]:
        return self._resolve(
            self.options.edit_properties,
            [p for p in self.resource.properties() if p.is_editable()],
        )

    def validate(self) -> None:
        """Resolve every configured property list, raising on unknown paths."""
        self.get_list_properties()
        self.get_show_properties()
        self.get_edit_properties()

    def get_actions(self) -> dict[str, ActionOptions]:
        """Default actions overlaid with user actions; disabled ones are dropped."""
        actions = default_actions()
        for key, user_action in self.options.actions.items():
            explicit = {name: getattr(user_action, name) for name in user_action.model_fields_set}
            if key in actions:
                actions[key] = actions[key].model_copy(update=explicit)
            else:
                actions[key] = ActionOptions(
                    **{"id": key, "label": key.replace("_", " ").title(), **explicit}
                )
        return {key: action for key, action in actions.items() if action.enable is not False}

    def actions_for(self, view: str) -> list[ActionOptions]:
        """Actions enabled on ``view`` (one of list/show/edit/new)."""
        return [
            action
            for action in self.get_actions().values()
            if action.enable is True or (isinstance(action.enable, list) and view in action.enable)
        ]

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.resource.id(),
            "name": self.get_resource_name(),
            "parent": self.get_parent(),
            "list_properties": [p.to_json() for p in self.get_list_properties()],
            "show_properties": [p.to_json() for p in self.get_show_properties()],
            "edit_properties": [p.to_json() for p in self.get_edit_properties()],
            "actions": [
                {"id": a.id, "icon": a.icon, "label": a.label, "enable": a.enable}
                for a in self.get_actions().values()
            ],
        }

    def __repr__(self) -> str:
        return f"BaseDecorator(resource={self.resource.id()!r})"


__all__ = ["DEFAULT_MAX_LIST_PROPERTIES", "BaseDecorator", "default_actions"]
