"""Tests for learnlog.journal.seed."""

from learnlog.journal.seed import SEED_DRAFTS, seed_logs


def test_three_example_logs(id_factory):
    logs = seed_logs(id_factory)
    assert [log.id for log in logs] == ["log-1", "log-2", "log-3"]
    assert [log.date for log in logs] == ["2026-02-18", "2026-02-19", "2026-02-20"]
    assert [log.pinned for log in logs] == [True, False, False]
    assert logs[0].tags == ["React", "TypeScript"]
    assert logs[1].tags == ["応用情報", "ネットワーク"]
    assert logs[2].tags == ["React"]
    assert all(log.images == [] for log in logs)


def test_fresh_copies(id_factory):
    logs = seed_logs(id_factory)
    logs[0].tags.append("mutated")
    assert SEED_DRAFTS[0].tags == ["React", "TypeScript"]
