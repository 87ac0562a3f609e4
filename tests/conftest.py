"""Shared fixtures"""

import logging

import pytest

from logosaurus import facade
from logosaurus.writers import MemoryWriter


@pytest.fixture
def memory_writer():
    """In-memory output destination."""
    return MemoryWriter()


@pytest.fixture
def fresh_facade(monkeypatch):
    """Allow init() to run once in this test and detach its handler afterwards."""
    root = logging.getLogger()
    old_level = root.level
    monkeypatch.setattr(facade, "_logger", None)
    monkeypatch.setattr(facade, "_handler", None)
    yield
    if facade._handler is not None:
        root.removeHandler(facade._handler)
    root.setLevel(old_level)
