"""Open a bookmark by name, or pick one interactively."""

import click

from bo.cli.ensure import Ensure
from bo.core.context import BoContext
from bo.core.launcher import open_bookmark, search_bookmark
from bo.core.picker import pick_and_open
from bo.core.resolver import resolve_bookmark


def run_pick(ctx: BoContext) -> None:
    """Show the picker and open the chosen bookmark.

    Cancelling or picking nothing is not an error.
    """
    config = ctx.config_store.load()
    Ensure.ideal_state(pick_and_open(config, ctx.picker, ctx.opener))


@click.command(
    "open",
    hidden=True,
    context_settings={"ignore_unknown_options": True},
)
@click.argument("name")
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def open_cmd(ctx: BoContext, name: str, words: tuple[str, ...]) -> None:
    """Open bookmark NAME, filling {query} in its URL with WORDS."""
    config = ctx.config_store.load()
    entry = Ensure.ideal_state(resolve_bookmark(config, name))

    if words:
        search_bookmark(ctx.opener, config, entry, words)
    else:
        open_bookmark(ctx.opener, config, entry)
