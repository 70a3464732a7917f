"""learnlog list / tags: browse the dashboard."""

from __future__ import annotations

from collections import Counter

import click

from learnlog.journal.models import PeriodTab, SortOrder

TAB_CHOICES = click.Choice([t.value for t in PeriodTab])
SORT_CHOICES = click.Choice([s.value for s in SortOrder])


@click.command("list")
@click.option("--tab", type=TAB_CHOICES, default=None, help="Period to show.")
@click.option("-q", "--query", default="", help="Search titles and content.")
@click.option("-t", "--tag", "tag_filter", multiple=True, help="Only logs carrying this tag (repeatable).")
@click.option("--sort", type=SORT_CHOICES, default=None, help="new = latest first, old = earliest first.")
@click.pass_obj
def list_logs(config, tab: str | None, query: str, tag_filter: tuple[str, ...], sort: str | None) -> None:
    """List logs: pinned first, then the rest sorted by date."""
    from learnlog.core.cli.common import build_controller, journal_settings
    from learnlog.core.cli.render import make_console, render_notice, render_view

    controller = build_controller(config)
    _, display = journal_settings(config)

    if tab:
        controller.set_tab(tab)
    if sort:
        controller.set_sort(sort)
    controller.set_query(query)
    for tag in dict.fromkeys(tag_filter):
        controller.toggle_tag(tag)

    console = make_console()
    render_notice(console, controller.notice)
    render_view(console, controller.view, controller.selection.tab, display)


@click.command()
@click.pass_obj
def tags(config) -> None:
    """Show every tag in use with how many logs carry it."""
    from learnlog.core.cli.common import build_controller
    from learnlog.core.cli.render import make_console

    controller = build_controller(config)
    counts = Counter(tag for log in controller.logs for tag in log.tags)
    console = make_console()
    if not counts:
        console.print("[dim]No tags yet.[/]")
        return
    for tag in controller.tags:
        console.print(f"#{tag}  {counts[tag]}", markup=False)
