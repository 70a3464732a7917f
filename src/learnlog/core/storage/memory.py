"""In-memory slot storage. Nothing survives the process."""

from .base import SlotStorage, StorageKeyError


class MemoryStorage(SlotStorage):
    """Dict-backed slot storage."""

    def __init__(self, initial: dict[str, str] | None = None, **config):
        super().__init__(**config)
        self._slots: dict[str, str] = dict(initial or {})
        self.write_count = 0

    def read(self, key: str) -> str:
        try:
            return self._slots[key]
        except KeyError:
            raise StorageKeyError(f"Key not found: {key}") from None

    def write(self, key: str, text: str) -> None:
        self._slots[key] = text
        self.write_count += 1

    def exists(self, key: str) -> bool:
        return key in self._slots

    def delete(self, key: str) -> bool:
        return self._slots.pop(key, None) is not None
