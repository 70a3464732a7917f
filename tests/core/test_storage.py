"""Tests for core.storage: LocalStorage and MemoryStorage."""

import errno
import os
from pathlib import Path

import pytest

from learnlog.core.storage import (
    LocalStorage,
    MemoryStorage,
    StorageError,
    StorageKeyError,
    StoragePermissionError,
    StorageQuotaError,
)


class TestLocalStorage:
    @pytest.fixture
    def storage(self, tmp_path):
        return LocalStorage(base_path=tmp_path / "store")

    def test_write_and_read(self, storage):
        storage.write("learning_logs_v1", '[{"title": "日本語"}]')
        assert storage.read("learning_logs_v1") == '[{"title": "日本語"}]'

    def test_creates_base_dir_on_write(self, tmp_path):
        storage = LocalStorage(base_path=tmp_path / "a" / "b")
        storage.write("slot", "x")
        assert (tmp_path / "a" / "b" / "slot.json").exists()

    def test_overwrite(self, storage):
        storage.write("slot", "first")
        storage.write("slot", "second")
        assert storage.read("slot") == "second"

    def test_no_temp_files_left(self, storage):
        storage.write("slot", "x")
        assert sorted(os.listdir(storage.base_path)) == ["slot.json"]

    def test_read_missing(self, storage):
        with pytest.raises(StorageKeyError):
            storage.read("missing")

    def test_exists_and_delete(self, storage):
        assert not storage.exists("slot")
        storage.write("slot", "x")
        assert storage.exists("slot")
        assert storage.delete("slot") is True
        assert storage.delete("slot") is False

    @pytest.mark.parametrize("key", ["", "   ", "../escape", "/etc/passwd", "~/home", "a\\b", "nul\x00"])
    def test_unsafe_keys_rejected(self, storage, key):
        with pytest.raises(StoragePermissionError):
            storage.write(key, "x")

    def test_nested_key(self, storage):
        storage.write("journals/main", "x")
        assert storage.read("journals/main") == "x"

    def test_quota_error_mapped(self, storage, monkeypatch):
        def full(*args, **kwargs):
            raise OSError(errno.ENOSPC, "No space left on device")

        monkeypatch.setattr("learnlog.core.storage.local.os.replace", full)
        with pytest.raises(StorageQuotaError):
            storage.write("slot", "x")
        assert not storage.exists("slot")
        assert os.listdir(storage.base_path) == []

    def test_other_os_error_mapped(self, storage, monkeypatch):
        def broken(*args, **kwargs):
            raise OSError(errno.EIO, "I/O error")

        monkeypatch.setattr("learnlog.core.storage.local.os.replace", broken)
        with pytest.raises(StorageError):
            storage.write("slot", "x")

    @pytest.mark.parametrize(
        "method, call",
        [("read_text", "read"), ("exists", "exists"), ("unlink", "delete")],
    )
    def test_permission_denied_mapped(self, storage, monkeypatch, method, call):
        storage.write("slot", "x")

        def denied(self, *args, **kwargs):
            raise PermissionError(errno.EACCES, "Permission denied")

        monkeypatch.setattr(Path, method, denied)
        with pytest.raises(StoragePermissionError):
            getattr(storage, call)("slot")

    def test_missing_parent_is_missing_key(self, storage):
        with pytest.raises(StorageKeyError):
            storage.read("nowhere/slot")
        assert storage.delete("nowhere/slot") is False


class TestMemoryStorage:
    def test_round_trip_and_count(self):
        storage = MemoryStorage()
        storage.write("k", "v")
        assert storage.read("k") == "v"
        assert storage.write_count == 1

    def test_initial_slots(self):
        assert MemoryStorage({"k": "v"}).read("k") == "v"

    def test_missing(self):
        with pytest.raises(StorageKeyError):
            MemoryStorage().read("k")

    def test_delete(self):
        storage = MemoryStorage({"k": "v"})
        assert storage.delete("k") is True
        assert storage.delete("k") is False
