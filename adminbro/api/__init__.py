"""
adminbro.api - FastAPI Integration

Usage:
    # app.py
    admin = AdminBro({"databases": [engine]})
    app = create_app(admin)

    # shell
    uvicorn app:app --reload
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI

from adminbro.api.router import create_router
from adminbro.version import VERSION

if TYPE_CHECKING:
    from adminbro.admin import AdminBro

logger = logging.getLogger(__name__)


def create_app(admin: AdminBro) -> FastAPI:
    """
    Create a FastAPI application serving ``admin``.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=f"{admin.options.branding.company_name} admin",
        version=VERSION,
        docs_url=None,
        redoc_url=None,
    )
    app.include_router(create_router(admin))
    app.state.admin = admin

    logger.info(f"Admin app created for {admin.options.root_path}")
    return app


__all__ = ["create_app", "create_router"]
