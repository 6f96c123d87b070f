"""Shared fixtures for urlstate tests."""

import pytest

from urlstate.backends.memory import MemoryHistoryBackend
from urlstate.context import reset_default_context


@pytest.fixture(autouse=True)
def fresh_default_context():
    """Give every test its own default navigation context."""
    reset_default_context()
    yield
    reset_default_context()


@pytest.fixture
def backend():
    """Memory history starting at a page with no parameters."""
    return MemoryHistoryBackend("http://localhost/list", auto_dispatch=True)
