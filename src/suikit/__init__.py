"""
suikit - Semantic UI components as pure class-name derivation.

Every component maps an immutable props record onto an ordered list of
CSS class tokens and a small element tree, rendered to HTML by Jinja2.

Quickstart:
    >>> from suikit import Button, ButtonProps, render_html
    >>> button = Button(ButtonProps(content="Save", primary=True))
    >>> button.classes
    ['ui', 'primary', 'button']
    >>> render_html(button.view())
    Markup('<button class="ui primary button" tabindex="0">Save</button>')
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .components import (
    Button,
    Container,
    Icon,
    IconGroup,
    Label,
    LabelDetail,
    build_props,
    create_component,
)
from .core.config import SuikitConfig, load_config
from .core.errors import ConfigError, PropsError, RenderError, SuikitError, UnknownComponentError
from .runtime import ClickEvent, ElementNode, HtmlRenderer, render_html
from .specs import (
    ButtonProps,
    ContainerProps,
    IconGroupProps,
    IconProps,
    LabelDetailProps,
    LabelProps,
)


try:
    __version__ = version("suikit")
except PackageNotFoundError:
    # running from a source checkout without an install
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # Components
    "Button",
    "Container",
    "Icon",
    "IconGroup",
    "Label",
    "LabelDetail",
    "build_props",
    "create_component",
    # Props
    "ButtonProps",
    "ContainerProps",
    "IconGroupProps",
    "IconProps",
    "LabelDetailProps",
    "LabelProps",
    # Rendering
    "ClickEvent",
    "ElementNode",
    "HtmlRenderer",
    "render_html",
    # Config and errors
    "SuikitConfig",
    "load_config",
    "SuikitError",
    "PropsError",
    "UnknownComponentError",
    "ConfigError",
    "RenderError",
]
