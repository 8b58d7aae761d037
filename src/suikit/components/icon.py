"""
Icon and IconGroup components.
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
from suikit.components.base import ClassDerivation, Component, InteractiveComponent
from suikit.runtime.nodes import ElementNode
from suikit.specs.icon import IconGroupProps, IconProps


@dataclass(frozen=True, slots=True)
class IconDerivation:
    classes: list[str]
    aria_hidden: str | None
    aria_label: str | None


def derive_icon_classes(props: IconProps) -> list[str]:
    return cx(
        from_optional(props.color),
        from_literal(props.name),
        from_optional(props.size),
        from_flag(props.bordered, "bordered"),
        from_flag(props.circular, "circular"),
        from_flag(props.disabled, "disabled"),
        from_flag(props.fitted, "fitted"),
        from_flag(props.inverted, "inverted"),
        from_flag(props.link, "link"),
        from_flag(props.loading, "loading"),
        from_either(props.corner, "corner"),
        from_optional_with_key(props.flipped, "flipped"),
        from_optional_with_key(props.rotated, "rotated"),
        from_literal("icon"),
        from_optional(props.class_name),
    )


def aria_hidden(props: IconProps) -> str | None:
    """Icons without an accessible label are hidden from assistive technology."""
    if props.aria_label is None:
        return "true"
    return props.aria_hidden


def derive_icon(props: IconProps) -> IconDerivation:
    return IconDerivation(
        classes=derive_icon_classes(props),
        aria_hidden=aria_hidden(props),
        aria_label=props.aria_label,
    )


def derive_icon_group(props: IconGroupProps) -> ClassDerivation:
    return ClassDerivation(
        classes=cx(
            from_optional(props.size),
            from_literal("icons"),
            from_optional(props.class_name),
        )
    )


class Icon(InteractiveComponent[IconProps, IconDerivation]):
    """An icon is a glyph used to represent something else."""

    name = "icon"
    props_type = IconProps
    derive = staticmethod(derive_icon)

    def view(self) -> ElementNode:
        derived = self.derived
        return ElementNode(
            tag=self.props.root,
            classes=derived.classes,
            attributes={
                "aria-hidden": derived.aria_hidden,
                "aria-label": derived.aria_label,
            },
            children=self.children_or(),
            on_click=self.click,
        )


class IconGroup(Component[IconGroupProps, ClassDerivation]):
    """Several icons can be used together as a group."""

    name = "icon_group"
    props_type = IconGroupProps
    derive = staticmethod(derive_icon_group)

    def view(self) -> ElementNode:
        return ElementNode(
            tag=self.props.root,
            classes=self.derived.classes,
            children=self.children_or(),
        )
