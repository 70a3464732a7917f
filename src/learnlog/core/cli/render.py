"""Terminal rendering of the dashboard with rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from learnlog.core.utils.text import normalize_text, truncate_text
from learnlog.journal.config import DisplayConfig
from learnlog.journal.dates import format_month_day
from learnlog.journal.models import Log, PeriodTab
from learnlog.journal.view import LogView, PeriodCounts

_TAB_LABELS = {
    PeriodTab.TODAY: "Today",
    PeriodTab.WEEK: "This week",
    PeriodTab.ALL: "All",
}


def make_console() -> Console:
    # No wrapping: long titles overflow instead of splitting mid-word
    return Console(soft_wrap=True)


def render_counts(console: Console, counts: PeriodCounts, active: PeriodTab) -> None:
    parts = []
    for tab in PeriodTab:
        text = f"{_TAB_LABELS[tab]} {getattr(counts, tab.value)}"
        parts.append(f"[reverse]{text}[/reverse]" if tab == active else text)
    console.print(" | ".join(parts))


def format_tags(tags: list[str]) -> str:
    return " ".join(f"#{escape(tag)}" for tag in tags)


def format_thumbnails(images: list[str], limit: int) -> str:
    """``[img] [img] +3`` style markers; the images themselves are never shown."""
    if not images:
        return ""
    markers = ["[img]"] * min(len(images), limit)
    if len(images) > limit:
        markers.append(f"+{len(images) - limit}")
    return escape(" ".join(markers))


def render_card(console: Console, log: Log, display: DisplayConfig) -> None:
    pin = "[bold yellow]*[/] " if log.pinned else "  "
    console.print(f"{pin}[cyan]{format_month_day(log.date)}[/]  [bold]{escape(log.title)}[/]  [dim]{log.id[:8]}[/]")
    if log.tags:
        console.print(f"    [green]{format_tags(log.tags)}[/]")
    preview = truncate_text(normalize_text(log.content), display.preview_chars)
    if preview:
        console.print(f"    {escape(preview)}")
    thumbs = format_thumbnails(log.images, display.max_thumbnails)
    if thumbs:
        console.print(f"    [magenta]{thumbs}[/]")


def render_view(console: Console, view: LogView, active: PeriodTab, display: DisplayConfig) -> None:
    render_counts(console, view.counts, active)
    console.print()
    if view.is_empty:
        console.print("[dim]No logs match.[/]")
        return
    if view.pinned:
        console.print("[bold]Pinned[/]")
        for log in view.pinned:
            render_card(console, log, display)
        console.print()
    if view.normal:
        console.print("[bold]Logs[/]")
        for log in view.normal:
            render_card(console, log, display)


def render_detail(console: Console, log: Log) -> None:
    lines = [
        f"[cyan]{log.date}[/]  {'[yellow]pinned[/]' if log.pinned else ''}",
        f"[green]{format_tags(log.tags)}[/]" if log.tags else "[dim]no tags[/]",
        "",
        escape(log.content) if log.content else "[dim](empty)[/]",
    ]
    if log.images:
        lines.append("")
        lines.append(f"[magenta]{len(log.images)} image(s) attached[/]")
    console.print(Panel("\n".join(lines), title=escape(log.title), subtitle=log.id))


def render_notice(console: Console, notice: str | None) -> None:
    if notice:
        console.print(f"[bold yellow]! {escape(notice)}[/]")
