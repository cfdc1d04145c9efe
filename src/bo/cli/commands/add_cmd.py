"""Add a bookmark to the config file."""

import click

from bo.cli.ensure import Ensure
from bo.cli.output import user_output
from bo.core.config import BookmarkEntry
from bo.core.context import BoContext


@click.command("add")
@click.argument("name")
@click.argument("url")
@click.option("--browser", "-b", default=None, help="Browser to use instead of the default")
@click.option("--alias", "-a", "aliases", multiple=True, help="Alias for the bookmark (repeatable)")
@click.pass_obj
def add_cmd(
    ctx: BoContext, name: str, url: str, browser: str | None, aliases: tuple[str, ...]
) -> None:
    """Add a bookmark NAME pointing at URL."""
    config = ctx.config_store.load()

    Ensure.invariant(bool(name.strip()), "Bookmark name must not be empty")
    Ensure.invariant(bool(url.strip()), "Bookmark URL must not be empty")
    Ensure.invariant(name not in config.bookmarks, f"Bookmark already exists: {name}")
    Ensure.invariant(name not in config.aliases, f"An alias with this name already exists: {name}")
    for alias in aliases:
        Ensure.invariant(alias not in config.aliases, f"Alias already exists: {alias}")
        Ensure.invariant(
            alias not in config.bookmarks, f"A bookmark with this name already exists: {alias}"
        )
    Ensure.invariant(len(set(aliases)) == len(aliases), "Aliases must be unique")

    ctx.config_store.add_bookmark(name, BookmarkEntry(url=url, browser=browser), aliases)
    user_output(click.style("✓", fg="green") + f" Added bookmark: {name}")
