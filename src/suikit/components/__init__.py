"""
Components: pure class/attribute derivation plus a memoized lifecycle.

Each module exposes its derivation as plain functions (``derive_button``,
``derive_icon``...) and a component class that owns a props record and
caches the derivation for it.
"""

from suikit.components.base import ClassDerivation, Component, InteractiveComponent, Memo
from suikit.components.button import Button, ButtonDerivation, ButtonShape, derive_button
from suikit.components.container import Container, derive_container
from suikit.components.icon import (
    Icon,
    IconDerivation,
    IconGroup,
    derive_icon,
    derive_icon_group,
)
from suikit.components.label import Label, LabelDetail, derive_label, derive_label_detail
from suikit.components.registry import (
    COMPONENTS,
    build_props,
    component_for,
    create_component,
    get_component_class,
)

__all__ = [
    # Lifecycle
    "Component",
    "InteractiveComponent",
    "Memo",
    "ClassDerivation",
    # Components
    "Button",
    "ButtonDerivation",
    "ButtonShape",
    "Container",
    "Icon",
    "IconDerivation",
    "IconGroup",
    "Label",
    "LabelDetail",
    # Derivations
    "derive_button",
    "derive_container",
    "derive_icon",
    "derive_icon_group",
    "derive_label",
    "derive_label_detail",
    # Registry
    "COMPONENTS",
    "build_props",
    "component_for",
    "create_component",
    "get_component_class",
]
