"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from learnlog.core.config import Config
from learnlog.core.exceptions import ConfigurationError
from learnlog.core.storage import LocalStorage
from learnlog.journal.config import DisplayConfig, JournalConfig
from learnlog.journal.controller import ConfirmFn, JournalController
from learnlog.journal.store import LogStore

LEARNLOG_DIR = Path.home() / ".learnlog"
CONFIG_PATH = LEARNLOG_DIR / "config.yaml"


def load_config(config_file: str | None = None, data_dir: str | None = None) -> Config:
    """Load config from *config_file*, falling back to ~/.learnlog/config.yaml."""
    return Config(config_file=config_file or str(CONFIG_PATH), data_dir=data_dir)


def journal_settings(config: Config) -> tuple[JournalConfig, DisplayConfig]:
    """Translate the validated app config into journal dataclasses."""
    try:
        settings = config.validated()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    journal = JournalConfig(
        storage_key=settings.storage.key,
        seed_on_empty=settings.journal.seed_on_empty,
        persist_seed=settings.journal.persist_seed,
    )
    display = DisplayConfig(
        default_tab=settings.display.default_tab,
        default_sort=settings.display.default_sort,
        max_thumbnails=settings.display.max_thumbnails,
        preview_chars=settings.display.preview_chars,
    )
    return journal, display


def build_controller(config: Config, *, confirm: ConfirmFn | None = None) -> JournalController:
    """Wire LocalStorage -> LogStore -> JournalController from config."""
    journal, display = journal_settings(config)
    storage = LocalStorage(base_path=config.get_data_dir())
    store = LogStore(storage, key=journal.storage_key)
    return JournalController(store, confirm=confirm, config=journal, display=display)


def resolve_log_id(controller: JournalController, ref: str) -> str | None:
    """Accept a full id or a unique id prefix. Returns None when nothing matches."""
    if not ref.strip():
        raise click.BadParameter("Log id cannot be empty.", param_hint="ID")
    if controller.get(ref) is not None:
        return ref
    matches = [log.id for log in controller.logs if log.id.startswith(ref)]
    if len(matches) > 1:
        raise click.ClickException(f"'{ref}' matches {len(matches)} logs; use more characters.")
    return matches[0] if matches else None
