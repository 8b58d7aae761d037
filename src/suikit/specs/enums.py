"""
Shared enumerations for component props.

Every member's value is the canonical class token the CSS framework
expects, so the enum-to-token mapping is the identity on values.
Multi-word tokens use a single space. ``@unique`` rejects two members
mapping to the same token at import time.
"""

from enum import StrEnum, unique


@unique
class Color(StrEnum):
    """Framework color palette."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    OLIVE = "olive"
    GREEN = "green"
    TEAL = "teal"
    BLUE = "blue"
    VIOLET = "violet"
    PURPLE = "purple"
    PINK = "pink"
    BROWN = "brown"
    GREY = "grey"
    BLACK = "black"


@unique
class Size(StrEnum):
    """Component sizes, shared by every sized component."""

    MINI = "mini"
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    BIG = "big"
    HUGE = "huge"
    MASSIVE = "massive"


@unique
class Floated(StrEnum):
    """Float position within a container."""

    LEFT = "left"
    RIGHT = "right"


@unique
class Flip(StrEnum):
    """Flip direction."""

    HORIZONTALLY = "horizontally"
    VERTICALLY = "vertically"


@unique
class TextAlign(StrEnum):
    """Text alignment. ``justified`` is emitted without the ``aligned`` key."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "justified"
