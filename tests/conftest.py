"""
Shared pytest fixtures for the reindex_tool test suite.
"""

import os
from types import SimpleNamespace

import pytest


@pytest.fixture
def make_files(tmp_path):
    """Create files in tmp_path (content = own name) and return the directory."""
    def _make(*names):
        for name in names:
            (tmp_path / name).write_text(name)
        return tmp_path
    return _make


@pytest.fixture
def listing():
    """Sorted names in a directory."""
    def _listing(directory):
        return sorted(os.listdir(directory))
    return _listing


class FlakyScandir:
    """os.scandir stand-in yielding names, raising for OSError items."""

    def __init__(self, items):
        self._items = iter(items)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __iter__(self):
        return self

    def __next__(self):
        item = next(self._items)
        if isinstance(item, OSError):
            raise item
        return SimpleNamespace(name=item)


@pytest.fixture
def flaky_scandir(monkeypatch):
    """Make os.scandir list the given items; OSError items fail that step."""
    def _install(*items):
        monkeypatch.setattr(os, "scandir", lambda path: FlakyScandir(items))
    return _install
