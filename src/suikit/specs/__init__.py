"""
Props records and variant enumerations for every component.

Props records are frozen pydantic models: equal field values mean equal
records, and updates build a new record instead of mutating.
"""

from suikit.specs.button import (
    ButtonAnimation,
    ButtonAttachedPosition,
    ButtonLabelPosition,
    ButtonProps,
)
from suikit.specs.container import ContainerProps
from suikit.specs.either import OFF, ON, Either, EitherProp, Flag, Variant, is_engaged
from suikit.specs.enums import Color, Flip, Floated, Size, TextAlign
from suikit.specs.icon import IconCorner, IconGroupProps, IconProps, IconRotate
from suikit.specs.label import (
    LabelAttachedPosition,
    LabelCorner,
    LabelDetailProps,
    LabelPointing,
    LabelProps,
    LabelRibbon,
)

__all__ = [
    # Either-props
    "Either",
    "EitherProp",
    "Flag",
    "Variant",
    "OFF",
    "ON",
    "is_engaged",
    # Shared enums
    "Color",
    "Flip",
    "Floated",
    "Size",
    "TextAlign",
    # Button
    "ButtonProps",
    "ButtonAnimation",
    "ButtonAttachedPosition",
    "ButtonLabelPosition",
    # Icon
    "IconProps",
    "IconGroupProps",
    "IconCorner",
    "IconRotate",
    # Label
    "LabelProps",
    "LabelDetailProps",
    "LabelAttachedPosition",
    "LabelCorner",
    "LabelPointing",
    "LabelRibbon",
    # Container
    "ContainerProps",
]
