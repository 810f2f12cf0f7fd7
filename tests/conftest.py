"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest

from attach_picker.config import runtime
from tests.helpers.selection_fakes import FakeHost, FakeLister


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep developer .env files and ATTACH_* variables out of every test."""
    for name in list(os.environ):
        if name.startswith("ATTACH_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
    yield


@pytest.fixture
def fake_host() -> FakeHost:
    """Provide a host that picks the first offered candidate."""
    return FakeHost()


@pytest.fixture
def fake_lister_factory():
    """Provide a factory for listers returning canned helper output."""

    def factory(text: str = "", error=None) -> FakeLister:
        return FakeLister(text=text, error=error)

    return factory
