"""Example logs installed on first run, when storage holds nothing."""

from __future__ import annotations

from collections.abc import Callable

from .models import Log, LogDraft

SEED_DRAFTS: tuple[LogDraft, ...] = (
    LogDraft(
        title="Reactで学習ログアプリのUIを作成",
        date="2026-02-18",
        tags=["React", "TypeScript"],
        content="ダッシュボード画面のレイアウトを作成し、検索バーと期間タブを配置した。",
        pinned=True,
    ),
    LogDraft(
        title="サブネットマスクの計算問題を演習",
        date="2026-02-19",
        tags=["応用情報", "ネットワーク"],
        content="2進数への変換手順を覚えて、ホスト数を求める問題を何問か解いた。",
    ),
    LogDraft(
        title="Todoの完了切替機能を実装",
        date="2026-02-20",
        tags=["React"],
        content="チェックボックスで状態を更新し、UIに反映されるようにした。",
    ),
)


def seed_logs(id_factory: Callable[[], str]) -> list[Log]:
    """Return fresh copies of the example logs with newly assigned ids."""
    return [Log.from_draft(id_factory(), draft) for draft in SEED_DRAFTS]
