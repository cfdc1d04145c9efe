"""Open the config file in $EDITOR."""

import click

from bo.core.context import BoContext


@click.command("edit")
@click.pass_obj
def edit_cmd(ctx: BoContext) -> None:
    """Edit the config file in $EDITOR."""
    # The config is not loaded here so that a broken file can still be fixed.
    ctx.editor.edit(ctx.config_store.config_path())
