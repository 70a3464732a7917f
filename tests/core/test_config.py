"""Tests for learnlog.core.config."""

import json
import os

import pytest
import yaml

from learnlog.core.config import Config, get_config, reset_config
from learnlog.core.exceptions import ConfigurationError
from learnlog.journal.models import PeriodTab, SortOrder


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Reset config singleton between tests."""
    reset_config()
    yield
    reset_config()


class TestConfig:
    def test_defaults(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("storage.key") == "learning_logs_v1"
        assert config.get("journal.seed_on_empty") is True
        assert config.get("display.default_sort") == "new"

    def test_default_data_dir(self):
        assert Config(env_prefix="").get("paths.data_dir").endswith(".learnlog-data")

    def test_custom_data_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("paths.data_dir") == tmp_dir
        assert config.get("paths.log_dir") == os.path.join(tmp_dir, "logs")

    def test_yaml_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"display": {"default_tab": "week"}}, f)

        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("display.default_tab") == "week"
        assert config.get("display.default_sort") == "new"

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"storage": {"key": "custom_slot"}}, f)

        assert Config(config_file=config_path, data_dir=tmp_dir).get("storage.key") == "custom_slot"

    def test_missing_file_uses_defaults(self, tmp_dir):
        config = Config(config_file=os.path.join(tmp_dir, "absent.yaml"), data_dir=tmp_dir)
        assert config.get("storage.key") == "learning_logs_v1"

    def test_broken_yaml(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("display: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            Config(config_file=config_path, data_dir=tmp_dir)

    def test_non_mapping_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            Config(config_file=config_path, data_dir=tmp_dir)

    def test_env_overrides_file(self, tmp_dir, monkeypatch):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"display": {"default_sort": "new"}}, f)

        monkeypatch.setenv("LEARNLOG_DISPLAY__DEFAULT_SORT", "old")
        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("display.default_sort") == "old"

    def test_custom_env_prefix(self, monkeypatch, tmp_dir):
        monkeypatch.setenv("MYLOG_STORAGE__KEY", "mine")
        assert Config(env_prefix="MYLOG_", data_dir=tmp_dir).get("storage.key") == "mine"

    def test_get_missing_key(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_ensure_directories(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.ensure_directories()
        assert os.path.isdir(os.path.join(tmp_dir, "logs"))

    def test_extra_defaults(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"custom": {"key": "value"}})
        assert config.get("custom.key") == "value"


class TestValidated:
    def test_typed_sections(self, tmp_dir):
        settings = Config(data_dir=tmp_dir).validated()
        assert settings.display.default_tab == PeriodTab.ALL
        assert settings.display.default_sort == SortOrder.NEW
        assert settings.storage.key == "learning_logs_v1"

    def test_env_strings_coerced(self, tmp_dir, monkeypatch):
        monkeypatch.setenv("LEARNLOG_JOURNAL__SEED_ON_EMPTY", "false")
        monkeypatch.setenv("LEARNLOG_DISPLAY__MAX_THUMBNAILS", "4")
        settings = Config(data_dir=tmp_dir).validated()
        assert settings.journal.seed_on_empty is False
        assert settings.display.max_thumbnails == 4

    def test_bad_value_raises_configuration_error(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("display.default_tab", "month")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            config.validated()


class TestGetConfig:
    def test_singleton(self, tmp_dir):
        assert get_config(data_dir=tmp_dir) is get_config(data_dir=tmp_dir)

    def test_reset(self, tmp_dir):
        first = get_config(data_dir=tmp_dir)
        reset_config()
        assert get_config(data_dir=tmp_dir) is not first
