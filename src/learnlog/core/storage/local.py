"""
Local filesystem storage backend.

Each slot is a UTF-8 file under ``base_path``. Writes land in a temporary
file first and are moved over the slot with ``os.replace``, so readers see
either the old value or the new one.
"""

import errno
import os
import tempfile
from pathlib import Path

from loguru import logger

from learnlog.core.types import PathLike

from .base import SlotStorage, StorageError, StorageKeyError, StoragePermissionError, StorageQuotaError

_QUOTA_ERRNOS = {errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)}


class LocalStorage(SlotStorage):
    """Local filesystem slot storage."""

    def __init__(self, base_path: PathLike = "~/.learnlog-data/storage", suffix: str = ".json", **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.suffix = suffix

    def _get_full_path(self, key: str) -> Path:
        """Resolve a storage key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = key.strip()
        if not raw_key:
            raise StoragePermissionError("Storage key cannot be empty.")
        if "\x00" in raw_key:
            raise StoragePermissionError("Storage key cannot contain null bytes.")
        if "\\" in raw_key:
            raise StoragePermissionError("Storage key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe storage key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / key_path).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe storage key '{key}': path traversal is not allowed.") from e
        return full_path.with_name(full_path.name + self.suffix)

    def read(self, key: str) -> str:
        path = self._get_full_path(key)
        try:
            return path.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError) as e:
            raise StorageKeyError(f"Key not found: {key}") from e
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def write(self, key: str, text: str) -> None:
        path = self._get_full_path(key)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
            tmp_name = None
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
        except OSError as e:
            if e.errno in _QUOTA_ERRNOS:
                raise StorageQuotaError(f"No space left to write {path}: {e}") from e
            raise StorageError(f"Cannot write to {path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError as e:
                    logger.debug(f"Could not remove temp file {tmp_name}: {e}")

    def exists(self, key: str) -> bool:
        path = self._get_full_path(key)
        try:
            return path.exists()
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot stat {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot stat {path}: {e}") from e

    def delete(self, key: str) -> bool:
        path = self._get_full_path(key)
        try:
            path.unlink()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot delete {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot delete {path}: {e}") from e
        return True
