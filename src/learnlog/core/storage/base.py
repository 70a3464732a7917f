"""
Abstract base class for slot storage backends.

A slot is a named text value that is always read and written whole,
like a browser's localStorage entry.
"""

from abc import ABC, abstractmethod

from learnlog.core.exceptions import LearnlogError


class SlotStorage(ABC):
    """Abstract base class for key -> text storage backends."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    def read(self, key: str) -> str:
        """Read a slot. Raises StorageKeyError if not found."""

    @abstractmethod
    def write(self, key: str, text: str) -> None:
        """Overwrite a slot with *text* in a single operation."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a slot exists."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a slot. Returns True if deleted, False if it didn't exist."""


class StorageError(LearnlogError):
    """Base exception for storage errors."""


class StorageKeyError(StorageError, KeyError):
    """Raised when a storage key doesn't exist."""


class StoragePermissionError(StorageError):
    """Raised when storage operation is not permitted."""


class StorageQuotaError(StorageError):
    """Raised when storage quota is exceeded."""
