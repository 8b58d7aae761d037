"""
Button component.

A button renders in one of two shapes:

- single: one element carrying every class and attribute;
- labeled: a wrapper element holding a Label and an inner <button>,
  with the label before the button for ``left`` and after it for
  ``right``.

The shape is resolved once per props record and feeds both the class
lists and the structural attributes, so they always agree on the element
type.
"""

from __future__ import annotations

from dataclasses import dataclass

from suikit.classes.compose import cx
from suikit.classes.tokens import (
    from_either,
    from_flag,
    from_literal,
    from_optional,
    from_optional_with_key,
)
from suikit.components.base import InteractiveComponent
from suikit.runtime.nodes import ElementNode
from suikit.specs.button import ButtonLabelPosition, ButtonProps
from suikit.specs.either import is_engaged

DEFAULT_ROOT = "button"
CONTAINER_ROOT = "div"


@dataclass(frozen=True, slots=True)
class ButtonShape:
    """Resolved structure of a button."""

    element_type: str
    label_position: ButtonLabelPosition | None  # None unless a label is attached

    @property
    def labeled(self) -> bool:
        return self.label_position is not None


@dataclass(frozen=True, slots=True)
class ButtonDerivation:
    """Every class list and structural attribute of one props record."""

    shape: ButtonShape
    base_classes: list[str]
    wrapper_classes: list[str]
    labeled_classes: list[str]
    classes: list[str]  # root element, single shape
    button_classes: list[str]  # inner <button>, labeled shape
    container_classes: list[str]  # wrapper element, labeled shape
    aria_role: str | None
    tab_index: int
    aria_pressed: str | None

    @property
    def root_classes(self) -> list[str]:
        """Classes of the outermost element for the resolved shape."""
        if self.shape.labeled:
            return self.container_classes
        return self.classes


# =============================================================================
# Structure
# =============================================================================


def resolve_shape(props: ButtonProps) -> ButtonShape:
    label_position = props.label_position if props.label is not None else None
    return ButtonShape(element_type=element_type(props), label_position=label_position)


def element_type(props: ButtonProps) -> str:
    """
    Root element type.

    A caller override wins. Otherwise attached or labeled buttons render
    as a container since they wrap or join other content.
    """
    if props.root != DEFAULT_ROOT:
        return props.root
    if is_engaged(props.attached) or props.label is not None:
        return CONTAINER_ROOT
    return props.root


def aria_role(props: ButtonProps, shape: ButtonShape) -> str | None:
    if props.role is not None:
        return props.role
    if shape.element_type != DEFAULT_ROOT:
        return "button"
    return None


def tab_index(props: ButtonProps) -> int:
    if props.tab_index is not None:
        return props.tab_index
    if props.disabled:
        return -1
    return 0


def aria_pressed(props: ButtonProps) -> str | None:
    if not props.toggle:
        return None
    return "true" if props.active else "false"


# =============================================================================
# Classes
# =============================================================================


def derive_base_classes(props: ButtonProps) -> list[str]:
    return cx(
        from_optional(props.color),
        from_optional(props.size),
        from_flag(props.active, "active"),
        from_flag(props.basic, "basic"),
        from_flag(props.circular, "circular"),
        from_flag(props.compact, "compact"),
        from_flag(props.fluid, "fluid"),
        from_flag(props.icon is not None, "icon"),
        from_flag(props.inverted, "inverted"),
        from_flag(props.loading, "loading"),
        from_flag(props.negative, "negative"),
        from_flag(props.positive, "positive"),
        from_flag(props.primary, "primary"),
        from_flag(props.secondary, "secondary"),
        from_flag(props.toggle, "toggle"),
        from_either(props.animated, "animated"),
        from_either(props.attached, "attached"),
    )


def derive_wrapper_classes(props: ButtonProps) -> list[str]:
    return cx(
        from_flag(props.disabled, "disabled"),
        from_optional_with_key(props.floated, "floated"),
    )


def derive_labeled_classes(shape: ButtonShape) -> list[str]:
    return from_optional_with_key(shape.label_position, "labeled")


def derive_button(props: ButtonProps) -> ButtonDerivation:
    """Derive the full button bundle from one props record."""
    shape = resolve_shape(props)
    base = derive_base_classes(props)
    wrapper = derive_wrapper_classes(props)
    labeled = derive_labeled_classes(shape)
    class_name = from_optional(props.class_name)

    return ButtonDerivation(
        shape=shape,
        base_classes=base,
        wrapper_classes=wrapper,
        labeled_classes=labeled,
        classes=cx(from_literal("ui"), base, wrapper, labeled, from_literal("button"), class_name),
        button_classes=cx(from_literal("ui"), base, from_literal("button"), class_name),
        container_classes=cx(
            from_literal("ui"), labeled, from_literal("button"), wrapper, class_name
        ),
        aria_role=aria_role(props, shape),
        tab_index=tab_index(props),
        aria_pressed=aria_pressed(props),
    )


# =============================================================================
# Component
# =============================================================================


class Button(InteractiveComponent[ButtonProps, ButtonDerivation]):
    """A Button indicates a possible user action."""

    name = "button"
    props_type = ButtonProps
    derive = staticmethod(derive_button)

    @property
    def classes(self) -> list[str]:
        return self.derived.root_classes

    def view(self) -> ElementNode:
        derived = self.derived
        if derived.shape.labeled:
            return self._labeled_view(derived)

        return ElementNode(
            tag=derived.shape.element_type,
            classes=derived.classes,
            attributes={
                "aria-pressed": derived.aria_pressed,
                "disabled": self.props.disabled,
                "role": derived.aria_role,
                "tabindex": derived.tab_index,
            },
            children=self.children_or(self.props.icon, self.props.content),
            on_click=self.click,
        )

    def _labeled_view(self, derived: ButtonDerivation) -> ElementNode:
        label = self.child(self.props.label)
        button = ElementNode(
            tag="button",
            classes=derived.button_classes,
            attributes={
                "aria-pressed": derived.aria_pressed,
                "disabled": self.props.disabled,
                "tabindex": derived.tab_index,
            },
            children=tuple(
                self.child(node)
                for node in (self.props.icon, self.props.content)
                if node is not None
            ),
        )
        if derived.shape.label_position == ButtonLabelPosition.LEFT:
            children = (label, button)
        else:
            children = (button, label)

        return ElementNode(
            tag=derived.shape.element_type,
            classes=derived.container_classes,
            children=children,
            on_click=self.click,
        )
