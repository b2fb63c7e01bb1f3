"""
Dashboard pages.

A dashboard is a ``PageBuilder`` subclass. The admin keeps the class and
instantiates it per request with itself as the argument; ``build`` fills the
page with blocks and ``render`` turns them into HTML.

Example:
    >>> class SalesDashboard(PageBuilder):
    ...     def build(self) -> None:
    ...         self.add_block("Revenue", "42k", columns=6)
    >>>
    >>> admin = AdminBro({"dashboard": SalesDashboard})
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from adminbro.rendering import Renderer
from adminbro.version import VERSION

if TYPE_CHECKING:
    from adminbro.admin import AdminBro


@dataclass
class Block:
    title: str
    content: str = ""
    columns: int = 12


class PageBuilder:
    """Collects content blocks and renders them on the dashboard template."""

    view = "pages/dashboard"

    def __init__(self, admin: AdminBro) -> None:
        self.admin = admin
        self.blocks: list[Block] = []

    def add_block(self, title: str, content: str = "", columns: int = 12) -> Block:
        if not 1 <= columns <= 12:
            raise ValueError("columns must be between 1 and 12")
        block = Block(title=title, content=content, columns=columns)
        self.blocks.append(block)
        return block

    def build(self) -> None:
        """Override to add blocks."""

    def context(self) -> dict[str, Any]:
        options = self.admin.options
        return {
            "blocks": self.blocks,
            "branding": options.branding,
            "assets": options.assets,
            "logout_path": options.logout_path,
            "version": VERSION,
        }

    def render(self) -> str:
        self.blocks = []
        self.build()
        return Renderer(self.view, self.context()).render()


class DefaultDashboard(PageBuilder):
    """Welcome block followed by one block per navigation group."""

    def build(self) -> None:
        company_name = self.admin.options.branding.company_name
        self.add_block("Welcome", f"{company_name} administration panel")

        groups: dict[str, list[str]] = {}
        for resource in self.admin.resources:
            decorator = resource.decorate()
            groups.setdefault(decorator.get_parent()["name"], []).append(
                decorator.get_resource_name()
            )
        for parent, names in groups.items():
            self.add_block(parent, ", ".join(names), columns=6)


__all__ = ["Block", "DefaultDashboard", "PageBuilder"]
