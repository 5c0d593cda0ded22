import pytest
from rich.console import Console

import argvmap.registry
from argvmap import Registry


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def default_registry(monkeypatch):
    """Fresh process-wide registry, restored after the test."""
    registry = Registry()
    monkeypatch.setattr(argvmap.registry, "default_registry", registry)
    return registry


@pytest.fixture
def console():
    return Console(width=70, force_terminal=True, highlight=False, color_system=None, legacy_windows=False)
