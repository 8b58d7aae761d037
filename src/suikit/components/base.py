"""
Component lifecycle: props ownership, memoized derivation, click dispatch.

Derivation is a pure function of the props record. A component holds the
current record and a Memo of that function, so a new record only triggers
recomputation when it is unequal to the previous one, and every derived
class list and attribute is recomputed together.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from suikit.core.config import SuikitConfig
from suikit.runtime.events import prevent_default
from suikit.runtime.nodes import ElementNode

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)
D = TypeVar("D")

_UNSET: Any = object()


@dataclass(frozen=True, slots=True)
class ClassDerivation:
    """Derivation of components whose only derived output is a class list."""

    classes: list[str]


class Memo(Generic[P, D]):
    """Caches ``fn(key)`` for the most recent key, compared by equality."""

    def __init__(self, fn: Callable[[P], D], name: str = ""):
        self._fn = fn
        self._name = name or getattr(fn, "__name__", "derivation")
        self._key: P = _UNSET
        self._value: D = _UNSET
        self.recomputations = 0

    def __call__(self, key: P) -> D:
        if self._key is _UNSET or key != self._key:
            self._value = self._fn(key)
            self._key = key
            self.recomputations += 1
            logger.debug("Recomputed %s (%d)", self._name, self.recomputations)
        return self._value


class Component(ABC, Generic[P, D]):
    """
    Base class for all components.

    Subclasses set ``name`` and ``props_type``, provide a pure
    ``derive(props)`` and build their element tree in ``view()``.
    """

    name: ClassVar[str]
    props_type: ClassVar[type[BaseModel]]

    def __init__(self, props: P, config: SuikitConfig | None = None):
        if not isinstance(props, self.props_type):
            raise TypeError(f"{type(self).__name__} expects {self.props_type.__name__}")
        self.props = props
        self.config = config or SuikitConfig()
        self._memo: Memo[P, D] = Memo(type(self).derive, name=f"{self.name} derivation")

    @staticmethod
    @abstractmethod
    def derive(props: Any) -> Any:
        """Pure derivation bundle for one props record."""

    @property
    def derived(self) -> D:
        """Derivation bundle for the current props."""
        return self._memo(self.props)

    @property
    def recomputations(self) -> int:
        return self._memo.recomputations

    @property
    def classes(self) -> list[str]:
        """Class tokens of the root element."""
        return self.derived.classes  # type: ignore[attr-defined]

    def change(self, props: P) -> bool:
        """
        Apply a new props record.

        Returns:
            True when the record differs from the current one and the
            component needs to re-render.
        """
        if props == self.props:
            return False
        self.props = props
        return True

    @abstractmethod
    def view(self) -> ElementNode:
        """Element tree for the current props."""

    def child(self, node: Any) -> Any:
        """Resolve a child: props records become their component's element."""
        return render_child(node, self.config)

    def children_or(self, *fallback: Any) -> tuple[Any, ...]:
        """Explicit children if any, else the shorthand fallback nodes."""
        children = getattr(self.props, "children", ())
        if children:
            return tuple(self.child(node) for node in children)
        return tuple(self.child(node) for node in fallback if node is not None)


class InteractiveComponent(Component[P, D]):
    """Component that forwards clicks to a caller-supplied ``on_click``."""

    def click(self, event: Any) -> None:
        """
        Dispatch a click.

        Disabled components suppress the default action and do not invoke
        the handler; otherwise the handler receives the event unmodified.
        """
        if getattr(self.props, "disabled", False):
            prevent_default(event)
            logger.debug("Suppressed click on disabled %s", self.name)
            return
        handler = self.props.on_click  # type: ignore[attr-defined]
        if handler is not None:
            handler(event)


def render_child(node: Any, config: SuikitConfig | None = None) -> Any:
    """Turn a nested props record into its component's element tree."""
    if isinstance(node, BaseModel) and not isinstance(node, ElementNode):
        from suikit.components.registry import component_for

        return component_for(node, config).view()
    return node
