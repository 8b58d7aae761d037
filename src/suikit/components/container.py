"""
Container component.
"""

from __future__ import annotations

from suikit.classes.compose import cx
from suikit.classes.tokens import from_flag, from_literal, from_optional, from_text_align
from suikit.components.base import ClassDerivation, Component
from suikit.runtime.nodes import ElementNode
from suikit.specs.container import ContainerProps


def derive_container(props: ContainerProps) -> ClassDerivation:
    return ClassDerivation(
        classes=cx(
            from_literal("ui"),
            from_flag(props.text, "text"),
            from_flag(props.fluid, "fluid"),
            from_text_align(props.text_align),
            from_literal("container"),
            from_optional(props.class_name),
        )
    )


class Container(Component[ContainerProps, ClassDerivation]):
    """A container limits content to a maximum width."""

    name = "container"
    props_type = ContainerProps
    derive = staticmethod(derive_container)

    def view(self) -> ElementNode:
        return ElementNode(
            tag=self.props.root,
            classes=self.derived.classes,
            children=self.children_or(self.props.content),
        )
