"""Shared pytest fixtures for suikit tests."""

from __future__ import annotations

from typing import Any

import pytest

from suikit.runtime.events import ClickEvent


class Recorder:
    """Callable that records every event it receives."""

    def __init__(self) -> None:
        self.events: list[Any] = []

    def __call__(self, event: Any) -> None:
        self.events.append(event)

    @property
    def called(self) -> bool:
        return bool(self.events)


@pytest.fixture
def recorder() -> Recorder:
    """Return a fresh click handler recorder."""
    return Recorder()


@pytest.fixture
def make_recorder() -> type[Recorder]:
    """Return the Recorder class for tests that need several handlers."""
    return Recorder


@pytest.fixture
def click_event() -> ClickEvent:
    """Return an unprevented click event."""
    return ClickEvent(target="test")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep tests independent of a suikit.toml or env config on the host."""
    monkeypatch.delenv("SUIKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
