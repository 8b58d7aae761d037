"""
Composition of class-token groups.
"""

from __future__ import annotations

from collections.abc import Iterable


def cx(*groups: Iterable[str]) -> list[str]:
    """
    Concatenate token groups in argument order.

    No de-duplication, sorting or trimming; empty groups contribute
    nothing.

    Example:
        cx(from_literal("ui"), from_flag(True, "basic"), from_literal("button"))
        -> ["ui", "basic", "button"]
    """
    tokens: list[str] = []
    for group in groups:
        tokens.extend(group)
    return tokens


def class_attr(tokens: Iterable[str]) -> str | None:
    """Join tokens into a class attribute value; None when there are none."""
    value = " ".join(tokens)
    return value or None
