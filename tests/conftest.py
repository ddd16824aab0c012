"""Shared fixtures for noconflict tests."""

from types import SimpleNamespace

import pytest

from noconflict.manager import ConflictManager
from noconflict.resolution import DEFAULT_CACHE


@pytest.fixture(autouse=True)
def clean_default_cache():
    """Keep the process-wide binding cache empty between tests."""
    DEFAULT_CACHE.clear()
    yield
    DEFAULT_CACHE.clear()


@pytest.fixture
def root():
    """A stand-in for the global context."""
    return SimpleNamespace()


@pytest.fixture
def nc(root):
    """A manager with a private cache rooted at a throwaway context."""
    return ConflictManager(root=root, private_cache=True)
