"""Tests for learnlog.core.exceptions."""

from learnlog.core.exceptions import (
    ConfigurationError,
    FileIOError,
    LearnlogError,
    PersistenceError,
)
from learnlog.core.storage import StorageError, StorageKeyError, StoragePermissionError, StorageQuotaError


def test_hierarchy():
    """All exceptions should inherit from LearnlogError."""
    for exc_cls in [ConfigurationError, PersistenceError, FileIOError, StorageError]:
        assert issubclass(exc_cls, LearnlogError)


def test_storage_errors():
    for exc_cls in [StorageKeyError, StoragePermissionError, StorageQuotaError]:
        assert issubclass(exc_cls, StorageError)
    assert issubclass(StorageKeyError, KeyError)


def test_catch_base():
    try:
        raise PersistenceError("disk full")
    except LearnlogError as e:
        assert "disk full" in str(e)
