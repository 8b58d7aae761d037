"""
Label and LabelDetail components.

When ``on_remove`` is set, a label ends with a remove icon. A caller's
``remove_icon`` keeps every prop except ``on_click``, which is rebound to
the label's remove handler.
"""

from __future__ import annotations

from typing import Any

from suikit.classes.compose import cx
from suikit.classes.tokens import (
    from_either,
    from_flag,
    from_literal,
    from_optional,
    from_optional_with_key,
    variant_token,
)
from suikit.components.base import ClassDerivation, Component, InteractiveComponent
from suikit.runtime.nodes import ElementNode
from suikit.specs.either import Either, Variant
from suikit.specs.icon import IconProps
from suikit.specs.label import LabelDetailProps, LabelPointing, LabelProps


def from_pointing(pointing: Either) -> list[str]:
    """
    Pointing tokens.

    Sideways directions precede the key ("left pointing"); vertical ones
    follow it ("pointing below").
    """
    if not isinstance(pointing, Variant):
        return from_either(pointing, "pointing")
    if pointing.value in (LabelPointing.ABOVE, LabelPointing.BELOW):
        return ["pointing", variant_token(pointing.value)]
    return [variant_token(pointing.value), "pointing"]


def derive_label(props: LabelProps) -> ClassDerivation:
    return ClassDerivation(
        classes=cx(
            from_literal("ui"),
            from_optional(props.color),
            from_pointing(props.pointing),
            from_optional(props.size),
            from_flag(props.active, "active"),
            from_flag(props.basic, "basic"),
            from_flag(props.circular, "circular"),
            from_flag(props.floating, "floating"),
            from_flag(props.horizontal, "horizontal"),
            from_flag(props.prompt, "prompt"),
            from_flag(props.tag, "tag"),
            from_either(props.corner, "corner"),
            from_either(props.ribbon, "ribbon"),
            from_optional_with_key(props.attached, "attached"),
            from_literal("label"),
            from_optional(props.class_name),
        )
    )


def derive_label_detail(props: LabelDetailProps) -> ClassDerivation:
    return ClassDerivation(
        classes=cx(from_literal("detail"), from_optional(props.class_name))
    )


class Label(InteractiveComponent[LabelProps, ClassDerivation]):
    """A label displays content classification."""

    name = "label"
    props_type = LabelProps
    derive = staticmethod(derive_label)

    def remove(self, event: Any) -> None:
        """Handle a click on the remove icon."""
        # the click reaches the label itself as well
        if self.props.on_click is not None:
            self.props.on_click(event)
        if self.props.on_remove is not None:
            self.props.on_remove(event)

    def remove_icon_props(self) -> IconProps | None:
        """Remove icon props with the click bound to ``remove``; None without on_remove."""
        if self.props.on_remove is None:
            return None
        if self.props.remove_icon is None:
            return IconProps(name=self.config.label.remove_icon, on_click=self.remove)
        return self.props.remove_icon.model_copy(update={"on_click": self.remove})

    def view(self) -> ElementNode:
        return ElementNode(
            tag=self.props.root,
            classes=self.derived.classes,
            children=self.children_or(
                self.props.icon,
                self.props.content,
                self.props.detail,
                self.remove_icon_props(),
            ),
            on_click=self.click,
        )


class LabelDetail(Component[LabelDetailProps, ClassDerivation]):
    """Detail text inside a label."""

    name = "label_detail"
    props_type = LabelDetailProps
    derive = staticmethod(derive_label_detail)

    def view(self) -> ElementNode:
        return ElementNode(
            tag=self.props.root,
            classes=self.derived.classes,
            children=self.children_or(),
        )
