"""learnlog add / show / edit / delete / pin: single-log actions."""

from __future__ import annotations

from typing import Any

import click

from learnlog.core.exceptions import FileIOError
from learnlog.journal.images import files_to_data_urls
from learnlog.journal.models import LogDraft

IMAGE_PATH = click.Path(exists=True, dir_okay=False)


def _load_images(paths: tuple[str, ...]) -> list[str]:
    try:
        return files_to_data_urls(paths)
    except FileIOError as e:
        raise click.ClickException(str(e)) from e


def _not_found(ref: str) -> None:
    click.echo(f"No log matches '{ref}'.")


@click.command()
@click.argument("title")
@click.option("--date", "log_date", default=None, help="YYYY-MM-DD, defaults to today.")
@click.option("-t", "--tag", "tag_list", multiple=True, help="Tag (repeatable, order kept).")
@click.option("-c", "--content", default="", help="Body text.")
@click.option("--image", "images", type=IMAGE_PATH, multiple=True, help="Attach an image file (repeatable).")
@click.option("--pin", is_flag=True, help="Pin the new log.")
@click.pass_obj
def add(config, title: str, log_date: str | None, tag_list: tuple[str, ...], content: str, images, pin: bool) -> None:
    """Record a new log."""
    from learnlog.core.cli.common import build_controller
    from learnlog.core.cli.render import make_console, render_notice

    fields: dict[str, Any] = {"title": title, "tags": list(tag_list), "content": content, "pinned": pin}
    if log_date:
        fields["date"] = log_date
    try:
        draft = LogDraft(**fields)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    draft.images = _load_images(images)

    controller = build_controller(config)
    log = controller.create_log(draft)
    console = make_console()
    render_notice(console, controller.notice)
    click.echo(f"Created {log.id}")


@click.command()
@click.argument("ref")
@click.pass_obj
def show(config, ref: str) -> None:
    """Show one log in full."""
    from learnlog.core.cli.common import build_controller, resolve_log_id
    from learnlog.core.cli.render import make_console, render_detail

    controller = build_controller(config)
    log_id = resolve_log_id(controller, ref)
    if log_id is None:
        _not_found(ref)
        return
    controller.open_detail(log_id)
    render_detail(make_console(), controller.get(controller.selection.detail_id))


@click.command()
@click.argument("ref")
@click.option("--title", default=None)
@click.option("--date", "log_date", default=None, help="YYYY-MM-DD.")
@click.option("-t", "--tag", "tag_list", multiple=True, help="Replace tags (repeatable).")
@click.option("--clear-tags", is_flag=True, help="Remove every tag.")
@click.option("-c", "--content", default=None)
@click.option("--image", "images", type=IMAGE_PATH, multiple=True, help="Attach another image (repeatable).")
@click.option("--pin/--unpin", default=None)
@click.pass_obj
def edit(config, ref: str, title, log_date, tag_list, clear_tags: bool, content, images, pin) -> None:
    """Change fields of an existing log."""
    from learnlog.core.cli.common import build_controller, resolve_log_id
    from learnlog.core.cli.render import make_console, render_notice

    controller = build_controller(config)
    log_id = resolve_log_id(controller, ref)
    if log_id is None:
        _not_found(ref)
        return

    patch: dict[str, Any] = {}
    if title is not None:
        patch["title"] = title
    if log_date is not None:
        patch["date"] = log_date
    if tag_list or clear_tags:
        patch["tags"] = list(tag_list)
    if content is not None:
        patch["content"] = content
    if pin is not None:
        patch["pinned"] = pin
    if images:
        patch["images"] = [*controller.get(log_id).images, *_load_images(images)]
    if not patch:
        click.echo("Nothing to change.")
        return

    controller.start_edit(log_id)
    try:
        controller.edit_log(log_id, patch)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    render_notice(make_console(), controller.notice)
    click.echo(f"Updated {log_id}")


@click.command()
@click.argument("ref")
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def delete(config, ref: str, yes: bool) -> None:
    """Delete a log permanently."""
    from learnlog.core.cli.common import build_controller, resolve_log_id
    from learnlog.core.cli.render import make_console, render_notice

    def confirm(log) -> bool:
        return yes or click.confirm(f"Delete '{log.title}'?", default=False)

    controller = build_controller(config, confirm=confirm)
    log_id = resolve_log_id(controller, ref)
    if log_id is None:
        _not_found(ref)
        return
    if controller.menu_delete(log_id):
        render_notice(make_console(), controller.notice)
        click.echo(f"Deleted {log_id}")
    else:
        click.echo("Cancelled.")


@click.command()
@click.argument("ref")
@click.pass_obj
def pin(config, ref: str) -> None:
    """Pin or unpin a log."""
    from learnlog.core.cli.common import build_controller, resolve_log_id
    from learnlog.core.cli.render import make_console, render_notice

    controller = build_controller(config)
    log_id = resolve_log_id(controller, ref)
    if log_id is None:
        _not_found(ref)
        return
    log = controller.menu_toggle_pinned(log_id)
    render_notice(make_console(), controller.notice)
    click.echo(f"{'Pinned' if log.pinned else 'Unpinned'} {log_id}")
