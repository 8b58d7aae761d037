"""Class-name derivation primitives and composition."""

from suikit.classes.compose import class_attr, cx
from suikit.classes.tokens import (
    from_either,
    from_flag,
    from_literal,
    from_optional,
    from_optional_with_key,
    from_text_align,
    variant_token,
)

__all__ = [
    "cx",
    "class_attr",
    "from_literal",
    "from_flag",
    "from_optional",
    "from_optional_with_key",
    "from_either",
    "from_text_align",
    "variant_token",
]
