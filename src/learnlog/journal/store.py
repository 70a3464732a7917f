"""LogStore: the persistence adapter for the log collection.

The whole collection lives in one storage slot as a JSON array. Reads are
forgiving (anything unusable comes back as an empty collection); writes
replace the slot in a single call and report failure as PersistenceError.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from loguru import logger

from learnlog.core.exceptions import PersistenceError
from learnlog.core.storage import SlotStorage, StorageError, StorageKeyError

from .models import Log

DEFAULT_KEY = "learning_logs_v1"


class LogStore:
    """Reads and writes the full log collection to a single named slot.

    Example::

        store = LogStore(LocalStorage("~/.learnlog-data"))
        logs = store.load()
        store.save(logs)
    """

    def __init__(self, storage: SlotStorage, key: str = DEFAULT_KEY):
        self.storage = storage
        self.key = key

    def exists(self) -> bool:
        """Whether the slot has ever been written."""
        try:
            return self.storage.exists(self.key)
        except StorageError as e:
            logger.warning(f"Cannot check storage slot '{self.key}': {e}")
            return False

    def load(self) -> list[Log]:
        """Return the stored collection, or an empty list if it is unusable.

        Never raises. Records that fail validation are skipped so one bad
        entry does not take the rest of the journal with it.
        """
        try:
            raw = self.storage.read(self.key)
        except StorageKeyError:
            return []
        except StorageError as e:
            logger.warning(f"Cannot read storage slot '{self.key}': {e}")
            return []

        if not raw or not raw.strip():
            return []

        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Storage slot '{self.key}' is not valid JSON: {e}")
            return []

        if not isinstance(parsed, list):
            logger.warning(f"Storage slot '{self.key}' holds {type(parsed).__name__}, expected a list")
            return []

        logs: list[Log] = []
        seen_ids: set[str] = set()
        for index, item in enumerate(parsed):
            try:
                log = Log.from_dict(item)
            except ValueError as e:
                logger.warning(f"Skipping stored log #{index}: {e}")
                continue
            if log.id in seen_ids:
                logger.warning(f"Skipping stored log #{index}: duplicate id {log.id}")
                continue
            seen_ids.add(log.id)
            logs.append(log)
        return logs

    def save(self, logs: Sequence[Log]) -> None:
        """Serialize and overwrite the slot with the full collection.

        Raises:
            PersistenceError: If the storage backend rejects the write.
        """
        payload = json.dumps([log.to_dict() for log in logs], ensure_ascii=False)
        try:
            self.storage.write(self.key, payload)
        except StorageError as e:
            raise PersistenceError(f"Cannot save logs to '{self.key}': {e}") from e
        logger.debug(f"Saved {len(logs)} logs to '{self.key}'")
