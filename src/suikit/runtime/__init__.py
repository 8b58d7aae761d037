"""Render boundary: element trees, click events and the HTML renderer."""

from suikit.runtime.events import ClickEvent, prevent_default
from suikit.runtime.nodes import ElementNode
from suikit.runtime.renderer import HtmlRenderer, Renderer, create_jinja_env, render_html

__all__ = [
    "ClickEvent",
    "ElementNode",
    "HtmlRenderer",
    "Renderer",
    "create_jinja_env",
    "prevent_default",
    "render_html",
]
