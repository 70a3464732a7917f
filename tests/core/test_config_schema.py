"""Tests for learnlog.core.config_schema."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from learnlog.core.config_schema import DisplaySection, LearnlogConfig, LoggingSection, PathsConfig, StorageConfig


def test_defaults():
    config = LearnlogConfig()
    assert config.storage.key == "learning_logs_v1"
    assert config.journal.persist_seed is True
    assert config.display.max_thumbnails == 2


def test_paths_expand_user():
    paths = PathsConfig(data_dir="~/journal")
    assert paths.data_dir == Path("~/journal").expanduser()


def test_extra_sections_allowed():
    config = LearnlogConfig.model_validate({"plugins": {"x": 1}})
    assert config.model_extra == {"plugins": {"x": 1}}


def test_thumbnail_count_positive():
    with pytest.raises(ValidationError):
        DisplaySection(max_thumbnails=0)


def test_unknown_sort_rejected():
    with pytest.raises(ValidationError):
        DisplaySection(default_sort="random")


def test_blank_storage_key_rejected():
    with pytest.raises(ValidationError):
        StorageConfig(key="  ")


def test_log_level_normalized():
    assert LoggingSection(level="debug").level == "DEBUG"
    with pytest.raises(ValidationError):
        LoggingSection(level="chatty")
