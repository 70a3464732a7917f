"""Shared test fixtures for learnlog."""

import itertools
import tempfile

import pytest

from learnlog.core.storage import MemoryStorage
from learnlog.journal.models import Log
from learnlog.journal.store import LogStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def memory_store(memory_storage):
    return LogStore(memory_storage)


@pytest.fixture
def id_factory():
    """Deterministic ids: log-1, log-2, ..."""
    counter = itertools.count(1)
    return lambda: f"log-{next(counter)}"


@pytest.fixture
def make_log():
    """Build a Log with sensible defaults; override any field by keyword."""
    counter = itertools.count(1)

    def _make(**overrides) -> Log:
        n = next(counter)
        fields = {
            "id": f"fixture-{n}",
            "title": f"Entry {n}",
            "date": "2026-02-20",
            "tags": [],
            "content": "",
            "images": [],
            "pinned": False,
        }
        fields.update(overrides)
        return Log(**fields)

    return _make
