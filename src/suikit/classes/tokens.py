"""
Class-token primitives.

Each primitive turns one piece of props data into zero or more ordered
class tokens. All of them are total: an absent or default value yields an
empty list, never an error.
"""

from __future__ import annotations

from enum import Enum

from suikit.specs.either import Either, Variant
from suikit.specs.enums import TextAlign


def variant_token(value: Enum | str) -> str:
    """Canonical token for an enum variant; plain strings pass through."""
    if isinstance(value, Enum):
        return str(value.value)
    return value


def from_literal(value: str) -> list[str]:
    """Always emit the literal."""
    return [value]


def from_flag(value: bool, key: str) -> list[str]:
    """Emit ``key`` when the flag is set."""
    if value:
        return [key]
    return []


def from_optional(value: Enum | str | None) -> list[str]:
    """Emit the value's token when present."""
    if value is None:
        return []
    return [variant_token(value)]


def from_optional_with_key(value: Enum | str | None, key: str) -> list[str]:
    """Emit the value's token followed by ``key`` when present."""
    if value is None:
        return []
    return [variant_token(value), key]


def from_either(value: Either, key: str) -> list[str]:
    """
    Resolve an either-prop.

    Flag(False) -> []
    Flag(True)  -> [key]
    Variant(v)  -> [token(v), key]
    """
    if isinstance(value, Variant):
        return [variant_token(value.value), key]
    return from_flag(value.on, key)


def from_text_align(value: TextAlign | str | None) -> list[str]:
    """
    Text alignment tokens.

    ``justified`` is emitted on its own; every other value is followed by
    the ``aligned`` key.
    """
    if value is None:
        return []
    if variant_token(value) == TextAlign.JUSTIFIED:
        return [TextAlign.JUSTIFIED.value]
    return from_optional_with_key(value, "aligned")
