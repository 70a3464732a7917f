"""
learnlog exception hierarchy.

All learnlog exceptions inherit from LearnlogError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class LearnlogError(Exception):
    """Base exception class for all learnlog errors."""


class ConfigurationError(LearnlogError):
    """Raised for configuration errors (missing keys, invalid values)."""


class PersistenceError(LearnlogError):
    """Raised when the log collection cannot be written to storage."""


class FileIOError(LearnlogError):
    """Raised for file I/O errors."""
