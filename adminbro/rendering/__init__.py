"""
adminbro.rendering - HTML Rendering

Thin wrapper over a Jinja2 environment loading the templates bundled with
the package.

Usage:
    >>> from adminbro.rendering import Renderer
    >>> html = Renderer("pages/login", {"action": "/admin/login"}).render()
"""

from adminbro.rendering.renderer import Renderer, get_environment

__all__ = ["Renderer", "get_environment"]
