"""
Storage backends for learnlog.

A slot storage holds named text values ("slots"), each written and read
whole. The local filesystem backend is the default; an in-memory backend
serves session-only use and tests.
"""

from .base import (
    SlotStorage,
    StorageError,
    StorageKeyError,
    StoragePermissionError,
    StorageQuotaError,
)
from .local import LocalStorage
from .memory import MemoryStorage

__all__ = [
    "LocalStorage",
    "MemoryStorage",
    "SlotStorage",
    "StorageError",
    "StorageKeyError",
    "StoragePermissionError",
    "StorageQuotaError",
]
