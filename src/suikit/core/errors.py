"""
Error types for suikit props validation, configuration and rendering.

Class derivation itself never fails: every token primitive is total over
its input. Errors only exist at the edges, where untyped input (JSON,
TOML, templates) enters the library.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError


class SuikitError(Exception):
    """Base exception for all suikit errors."""

    def __init__(self, message: str, source: Path | str | None = None):
        self.message = message
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with its source if available."""
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class PropsError(SuikitError):
    """
    Raised when a props mapping cannot be turned into a props record.

    Examples:
    - Unknown enum token ("sideways" for a label pointing)
    - Wrong field type ("yes" for a flag)
    - A variant from the wrong enum in an either-prop
    """

    pass


class UnknownComponentError(PropsError):
    """Raised when a component name is not registered."""

    pass


class ConfigError(SuikitError):
    """
    Raised when the suikit.toml configuration cannot be used.

    Examples:
    - File missing when explicitly requested
    - Invalid TOML syntax
    - Wrong value types in a known section
    """

    pass


class RenderError(SuikitError):
    """
    Raised when the HTML renderer fails.

    Examples:
    - Element template missing from every template directory
    - Template syntax errors in a project override
    """

    pass


def make_props_error(component: str, error: PydanticValidationError) -> PropsError:
    """
    Helper to create a PropsError from a pydantic validation failure.

    Args:
        component: Component name the props were meant for
        error: The pydantic ValidationError

    Returns:
        PropsError listing every failing field, one per line
    """
    lines = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        lines.append(f"{location}: {detail['msg']}")
    return PropsError("invalid props\n" + "\n".join(lines), source=component)
