"""learnlog CLI: browse and edit the learning log from the terminal."""

import click

from learnlog import __version__
from learnlog.core.exceptions import ConfigurationError
from learnlog.core.utils.logging import setup_logging


@click.group()
@click.version_option(version=__version__, package_name="learnlog")
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Where the journal is stored.")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, config_file: str | None, verbose: bool) -> None:
    """learnlog: a personal learning-log journal."""
    from learnlog.core.cli.common import load_config

    try:
        config = load_config(config_file=config_file, data_dir=data_dir)
        logging_settings = config.validated().logging
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    config.ensure_directories()
    level = "DEBUG" if verbose else logging_settings.level
    setup_logging(level=level, log_file=logging_settings.file)
    ctx.obj = config


# Register subcommands
from .list_cmd import list_logs, tags
from .log_cmds import add, delete, edit, pin, show

main.add_command(list_logs)
main.add_command(tags)
main.add_command(show)
main.add_command(add)
main.add_command(edit)
main.add_command(delete)
main.add_command(pin)
