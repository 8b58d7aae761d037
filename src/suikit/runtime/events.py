"""
Interaction events delivered to component click handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class ClickEvent:
    """A click on a rendered element.

    Handlers receive the event object unmodified. Disabled components call
    ``prevent_default()`` instead of invoking the handler.
    """

    target: str | None = None
    detail: Any = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        """Suppress the element's default action."""
        self.default_prevented = True


def prevent_default(event: Any) -> None:
    """Call ``prevent_default()`` on events that support it."""
    prevent = getattr(event, "prevent_default", None)
    if callable(prevent):
        prevent()
