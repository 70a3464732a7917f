"""Pydantic models for config validation.

``Config.validated()`` returns a typed ``LearnlogConfig``. Dict-based
access through ``Config.get`` keeps working unchanged; env var overrides
arrive as strings and are coerced here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from learnlog.journal.models import PeriodTab, SortOrder


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    log_dir: Path | None = None

    @field_validator("data_dir", "log_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class StorageConfig(BaseModel):
    """Where the log collection is persisted."""

    key: str = "learning_logs_v1"

    @field_validator("key")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("storage key cannot be empty")
        return v


class JournalSection(BaseModel):
    """First-run seeding behaviour."""

    seed_on_empty: bool = True
    persist_seed: bool = True


class DisplaySection(BaseModel):
    """Initial selection and card rendering knobs."""

    default_tab: PeriodTab = PeriodTab.ALL
    default_sort: SortOrder = SortOrder.NEW
    max_thumbnails: int = Field(default=2, ge=1)
    preview_chars: int = Field(default=80, ge=10)


class LoggingSection(BaseModel):
    level: str = "WARNING"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


class LearnlogConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so custom sections survive validation.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig(data_dir=Path("~/.learnlog-data"))
    storage: StorageConfig = StorageConfig()
    journal: JournalSection = JournalSection()
    display: DisplaySection = DisplaySection()
    logging: LoggingSection = LoggingSection()
