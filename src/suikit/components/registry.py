"""
Component registry.

Maps component names and props record types to component classes, and
builds props records from untyped mappings (JSON, CLI input).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from suikit.components.base import Component
from suikit.components.button import Button
from suikit.components.container import Container
from suikit.components.icon import Icon, IconGroup
from suikit.components.label import Label, LabelDetail
from suikit.core.config import SuikitConfig
from suikit.core.errors import UnknownComponentError, make_props_error

COMPONENTS: dict[str, type[Component[Any, Any]]] = {
    cls.name: cls for cls in (Button, Icon, IconGroup, Label, LabelDetail, Container)
}

_BY_PROPS_TYPE: dict[type[BaseModel], type[Component[Any, Any]]] = {
    cls.props_type: cls for cls in COMPONENTS.values()
}


def get_component_class(name: str) -> type[Component[Any, Any]]:
    """Look up a component class by name ("button", "icon_group", ...)."""
    key = name.strip().lower().replace("-", "_")
    try:
        return COMPONENTS[key]
    except KeyError:
        known = ", ".join(sorted(COMPONENTS))
        raise UnknownComponentError(f"unknown component (known: {known})", source=name) from None


def component_for(props: BaseModel, config: SuikitConfig | None = None) -> Component[Any, Any]:
    """Instantiate the component matching a props record."""
    cls = _BY_PROPS_TYPE.get(type(props))
    if cls is None:
        raise UnknownComponentError(
            f"no component for props type {type(props).__name__}", source=type(props).__name__
        )
    return cls(props, config)


def build_props(name: str, data: dict[str, Any] | None = None) -> BaseModel:
    """Validate a mapping into the named component's props record."""
    cls = get_component_class(name)
    try:
        return cls.props_type.model_validate(data or {})
    except ValidationError as e:
        raise make_props_error(cls.name, e) from e


def create_component(
    name: str, data: dict[str, Any] | None = None, config: SuikitConfig | None = None
) -> Component[Any, Any]:
    """Build props from a mapping and instantiate the named component."""
    cls = get_component_class(name)
    return cls(build_props(name, data), config)
