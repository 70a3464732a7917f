"""Tests for learnlog.journal.config."""

from learnlog.journal.config import DisplayConfig, JournalConfig
from learnlog.journal.models import PeriodTab, SortOrder


class TestJournalConfig:
    def test_defaults(self):
        config = JournalConfig()
        assert config.storage_key == "learning_logs_v1"
        assert config.seed_on_empty is True
        assert config.persist_seed is False

    def test_custom_values(self):
        config = JournalConfig(storage_key="other", seed_on_empty=False)
        assert config.storage_key == "other"
        assert config.seed_on_empty is False


class TestDisplayConfig:
    def test_defaults(self):
        config = DisplayConfig()
        assert config.default_tab == PeriodTab.ALL
        assert config.default_sort == SortOrder.NEW
        assert config.max_thumbnails == 2
