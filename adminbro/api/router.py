"""
adminbro.api.router - Admin Router

Builds the FastAPI router serving the dashboard, the login page and the
resource JSON endpoints of one admin instance.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from adminbro.api.schemas import RecordListResponse, RecordResponse, ResourceListResponse, ResourceResponse

if TYPE_CHECKING:
    from adminbro.adapters.base import BaseResource
    from adminbro.admin import AdminBro

logger = logging.getLogger(__name__)


def _prefix(path: str) -> str:
    return "" if path == "/" else path


def create_router(admin: AdminBro) -> APIRouter:
    """
    Create the router for ``admin``.

    Routes are registered under the admin's ``root_path``; the login page is
    served at ``login_path``.
    """
    root = _prefix(admin.options.root_path)
    router = APIRouter(tags=["admin"])

    def get_resource(resource_id: str) -> BaseResource:
        resource = admin.find_resource(resource_id)
        if resource is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Resource '{resource_id}' not found",
            )
        return resource

    @router.get(root or "/", response_class=HTMLResponse)
    def dashboard() -> str:
        """Render the dashboard page."""
        return admin.render_dashboard()

    @router.get(admin.options.login_path, response_class=HTMLResponse)
    def login_page() -> str:
        """Render the login form posting back to the login path."""
        return admin.render_login(action=admin.options.login_path)

    @router.get(f"{root}/api/resources", response_model=ResourceListResponse)
    def list_resources() -> ResourceListResponse:
        """List decorated summaries of all resources."""
        items = [ResourceResponse(**r.decorate().to_json()) for r in admin.resources]
        return ResourceListResponse(items=items, total=len(items))

    @router.get(f"{root}/api/resources/{{resource_id}}", response_model=ResourceResponse)
    def show_resource(resource_id: str) -> ResourceResponse:
        """Return the decorated summary of one resource."""
        return ResourceResponse(**get_resource(resource_id).decorate().to_json())

    @router.get(
        f"{root}/api/resources/{{resource_id}}/records",
        response_model=RecordListResponse,
    )
    def list_records(
        resource_id: str,
        page: Annotated[int, Query(ge=1)] = 1,
        page_size: Annotated[int, Query(ge=1, le=100)] = 10,
        sort_by: str | None = None,
        direction: Annotated[str, Query(pattern="^(asc|desc)$")] = "asc",
    ) -> RecordListResponse:
        """
        List records of a resource.

        Args:
            resource_id: Resource id
            page: Page number (1-indexed)
            page_size: Items per page (max 100)
            sort_by: Property path to sort on
            direction: asc or desc

        Returns:
            Paginated list of records
        """
        resource = get_resource(resource_id)
        if sort_by is not None and resource.property(sort_by) is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown property '{sort_by}'",
            )

        total = resource.count()
        records = resource.find(
            limit=page_size,
            offset=(page - 1) * page_size,
            sort=(sort_by, direction) if sort_by else None,
        )
        pages = (total + page_size - 1) // page_size if total > 0 else 1

        return RecordListResponse(
            items=[RecordResponse(**record.to_json()) for record in records],
            total=total,
            page=page,
            page_size=page_size,
            pages=pages,
        )

    return router
