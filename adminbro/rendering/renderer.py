"""
Renderer for bundled page templates.
"""

import logging
from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateNotFound, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared, read-only Jinja2 environment."""
    return Environment(
        loader=PackageLoader("adminbro.rendering", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class Renderer:
    """
    Renders one view with the given data.

    ``view`` is a template path relative to the templates directory without
    the ``.html`` suffix, e.g. ``"pages/login"``.
    """

    def __init__(self, view: str, data: dict[str, Any] | None = None) -> None:
        self.view = view
        self.data = dict(data or {})

    def render(self) -> str:
        env = get_environment()
        try:
            template = env.get_template(f"{self.view}{TEMPLATE_SUFFIX}")
        except TemplateNotFound:
            logger.error(f"Template not found: {self.view}", exc_info=True)
            raise
        return template.render(**self.data)

    def __repr__(self) -> str:
        return f"Renderer(view={self.view!r})"
