"""
Jinja2 renderer for component element trees.

Turns an ElementNode (element type, class list, attributes, children)
into HTML. Project templates can override ``element.html``; the built-in
template stays reachable through the ``suikit://`` prefix.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PrefixLoader,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup, escape
from pydantic import BaseModel

from suikit.core.config import RenderConfig
from suikit.core.errors import RenderError
from suikit.runtime.nodes import ElementNode

logger = logging.getLogger(__name__)

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"
ELEMENT_TEMPLATE = "element.html"


class Renderer(Protocol):
    """Render boundary: turns an element tree into output."""

    def render(self, node: ElementNode) -> Any: ...


def create_jinja_env(
    project_templates_dir: Path | None = None, autoescape: bool = True
) -> Environment:
    """Create and configure the Jinja2 environment.

    Args:
        project_templates_dir: Optional directory whose templates take
            priority over the built-in ones.
        autoescape: Escape text children and attribute values.
    """
    framework_loader = FileSystemLoader(str(TEMPLATES_DIR))

    if project_templates_dir and project_templates_dir.is_dir():
        logger.debug("Using project templates from %s", project_templates_dir)
        main_loader = ChoiceLoader(
            [FileSystemLoader(str(project_templates_dir)), framework_loader]
        )
    else:
        main_loader = ChoiceLoader([framework_loader])

    # "suikit://element.html" always resolves to the built-in template
    loader = ChoiceLoader(
        [PrefixLoader({"suikit": framework_loader}, delimiter="://"), main_loader]
    )

    return Environment(
        loader=loader,
        autoescape=select_autoescape(["html"]) if autoescape else False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class HtmlRenderer:
    """Default render collaborator producing HTML markup."""

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()
        self.env = create_jinja_env(self.config.templates_dir, self.config.autoescape)
        try:
            self._template = self.env.get_template(ELEMENT_TEMPLATE)
        except TemplateError as e:
            raise RenderError(f"cannot load template: {e}", source=ELEMENT_TEMPLATE) from e
        logger.debug("Loaded template %s", self._template.filename)

    def render(self, node: ElementNode) -> Markup:
        """Render an element and its descendants."""
        children = [self._render_child(child) for child in node.children if child is not None]
        try:
            html = self._template.render(node=node, children=children)
        except TemplateError as e:
            raise RenderError(f"cannot render <{node.tag}>: {e}", source=ELEMENT_TEMPLATE) from e
        return Markup(html)

    def _render_child(self, child: Any) -> Any:
        if isinstance(child, BaseModel) and not isinstance(child, ElementNode):
            # props records placed directly in a caller-built node
            from suikit.components.base import render_child

            child = render_child(child)
        if isinstance(child, ElementNode):
            return self.render(child)
        if isinstance(child, Markup):
            return child
        if self.config.autoescape:
            return escape(str(child))
        return str(child)


def render_html(node: ElementNode, config: RenderConfig | None = None) -> Markup:
    """Render a node with a one-off HtmlRenderer."""
    return HtmlRenderer(config).render(node)
