"""
Button props record.
"""

from collections.abc import Callable
from enum import StrEnum, unique
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from suikit.specs.either import OFF, EitherProp
from suikit.specs.enums import Color, Floated, Size
from suikit.specs.icon import IconProps
from suikit.specs.label import LabelProps

# =============================================================================
# Variants
# =============================================================================


@unique
class ButtonAnimation(StrEnum):
    """Animation used to reveal hidden content."""

    FADE = "fade"
    VERTICAL = "vertical"


@unique
class ButtonAttachedPosition(StrEnum):
    """Side a button attaches to other content."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@unique
class ButtonLabelPosition(StrEnum):
    """Side a labeled button shows its label on."""

    LEFT = "left"
    RIGHT = "right"


# =============================================================================
# Props
# =============================================================================


class ButtonProps(BaseModel):
    """
    A button indicates a possible user action.

    Example:
        ButtonProps(
            content="Like",
            icon=IconProps(name="heart"),
            label=LabelProps(content="2,048", basic=True),
            label_position=ButtonLabelPosition.RIGHT,
        )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: str = Field(default="button", description="HTML element type to render as root element")
    active: bool = Field(default=False, description="Currently the active user selection")
    animated: EitherProp(ButtonAnimation) = Field(  # type: ignore[valid-type]
        default=OFF, description="A button can animate to show hidden content"
    )
    attached: EitherProp(ButtonAttachedPosition) = Field(  # type: ignore[valid-type]
        default=OFF, description="A button can be attached to other content"
    )
    basic: bool = Field(default=False, description="A basic button is less pronounced")
    children: tuple[Any, ...] = Field(default=(), description="Primary content")
    circular: bool = Field(default=False, description="A button can be circular")
    class_name: str | None = Field(default=None, description="Additional classes")
    color: Color | None = Field(default=None, description="A button can have different colors")
    compact: bool = Field(default=False, description="Reduced padding")
    content: str | None = Field(default=None, description="Shorthand for primary content")
    disabled: bool = Field(default=False, description="Currently unable to be interacted with")
    floated: Floated | None = Field(default=None, description="Aligned to a side of its container")
    fluid: bool = Field(default=False, description="Takes the width of its container")
    icon: IconProps | None = Field(default=None, description="Icon shown before the content")
    inverted: bool = Field(default=False, description="Formatted to appear on dark backgrounds")
    label: LabelProps | None = Field(default=None, description="Label attached to one side")
    label_position: ButtonLabelPosition = Field(
        default=ButtonLabelPosition.LEFT, description="Side the label appears on"
    )
    loading: bool = Field(default=False, description="Shows a loading indicator")
    negative: bool = Field(default=False, description="Hints towards a negative consequence")
    on_click: Callable[[Any], Any] | None = Field(default=None, description="Called on click")
    positive: bool = Field(default=False, description="Hints towards a positive consequence")
    primary: bool = Field(default=False, description="Primary level of emphasis")
    role: str | None = Field(default=None, description="The role of the HTML element")
    secondary: bool = Field(default=False, description="Secondary level of emphasis")
    size: Size | None = Field(default=None, description="A button can have different sizes")
    tab_index: int | None = Field(default=None, description="A button can receive focus")
    toggle: bool = Field(default=False, description="Formatted to toggle on and off")
