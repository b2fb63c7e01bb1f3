"""
adminbro.api.schemas - Admin API Schemas

Pydantic schemas for the JSON endpoints of the admin router.
"""

from typing import Any

from pydantic import BaseModel, Field


class PropertyResponse(BaseModel):
    path: str
    name: str
    type: str
    is_id: bool = False
    is_title: bool = False


class ActionResponse(BaseModel):
    id: str | None = None
    icon: str | None = None
    label: str | None = None
    enable: bool | list[str] = True


class ParentResponse(BaseModel):
    name: str
    icon: str | None = None


class ResourceResponse(BaseModel):
    """Decorated description of one resource."""

    id: str
    name: str
    parent: ParentResponse
    list_properties: list[PropertyResponse]
    show_properties: list[PropertyResponse]
    edit_properties: list[PropertyResponse]
    actions: list[ActionResponse]


class ResourceListResponse(BaseModel):
    items: list[ResourceResponse]
    total: int


class RecordResponse(BaseModel):
    id: Any = None
    title: str
    params: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, Any] = Field(default_factory=dict)


class RecordListResponse(BaseModel):
    """Paginated records of one resource."""

    items: list[RecordResponse]
    total: int
    page: int
    page_size: int
    pages: int
