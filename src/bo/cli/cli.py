import logging
from pathlib import Path

import click

from bo.cli.commands.add_cmd import add_cmd
from bo.cli.commands.completion_cmd import completion_cmd
from bo.cli.commands.edit_cmd import edit_cmd
from bo.cli.commands.open_cmd import open_cmd, run_pick
from bo.cli.group import BookmarkGroup
from bo.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(
    cls=BookmarkGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    subcommand_metavar="[NAME [QUERY]...] | COMMAND [ARGS]...",
)
@click.version_option(package_name="bo")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the config file. Defaults to $XDG_CONFIG_HOME/bo/config.toml.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, debug: bool) -> None:
    """Open bookmarks by name.

    With no NAME, pick a bookmark interactively. With extra QUERY words,
    they replace {query} in the bookmark's URL.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(config_path=config_path)

    if ctx.invoked_subcommand is None:
        run_pick(ctx.obj)


cli.add_command(open_cmd)
cli.add_command(add_cmd)
cli.add_command(edit_cmd)
cli.add_command(completion_cmd)


def main() -> None:
    """CLI entry point used by the `bo` console script."""
    cli()
