"""
Element tree produced by component views.

A view never builds HTML itself. It chooses the four render inputs
(element type, class list, attributes, children) and hands them to the
renderer as an ElementNode.
"""

from collections.abc import Callable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from suikit.classes.compose import class_attr


class ElementNode(BaseModel):
    """
    Element node.

    Example:
        ElementNode(
            tag="button",
            classes=["ui", "primary", "button"],
            attributes={"tabindex": 0},
            children=("Save",),
        )
    """

    model_config = ConfigDict(frozen=True)

    tag: str = Field(description="HTML element type")
    classes: tuple[str, ...] = Field(default=(), description="Ordered class tokens")
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Attributes; None and False are omitted, True renders as a bare attribute",
    )
    children: tuple[Any, ...] = Field(default=(), description="Child nodes or text")
    on_click: Callable[[Any], Any] | None = Field(
        default=None, description="Click handler bound by the owning component"
    )

    @property
    def class_value(self) -> str | None:
        """Class attribute value, None when there are no tokens."""
        return class_attr(self.classes)

    def rendered_attributes(self) -> list[tuple[str, Any]]:
        """Attributes that appear in the output, in insertion order."""
        return [
            (name, value)
            for name, value in self.attributes.items()
            if value is not None and value is not False
        ]

    def iter_elements(self) -> Iterator["ElementNode"]:
        """Depth-first iteration over this node and its element descendants."""
        yield self
        for child in self.children:
            if isinstance(child, ElementNode):
                yield from child.iter_elements()

