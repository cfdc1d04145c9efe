"""Generate a static fish completion script."""

from pathlib import Path

import click

from bo.cli.ensure import UserFacingCliError
from bo.cli.output import machine_output, user_output
from bo.core.completion import generate_fish_completion
from bo.core.context import BoContext

PROGRAM_NAME = "bo"
DEFAULT_OUTPUT = "~/.config/fish/completions/bo.fish"


def _visible_subcommands(click_ctx: click.Context) -> list[tuple[str, str]]:
    root = click_ctx.find_root().command
    assert isinstance(root, click.Group), type(root)
    return [
        (name, command.get_short_help_str())
        for name, command in sorted(root.commands.items())
        if not command.hidden
    ]


@click.command("completion")
@click.option(
    "--output",
    "-o",
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Where to write the fish completion script",
)
@click.pass_context
def completion_cmd(click_ctx: click.Context, output: str) -> None:
    """Generate fish shell completions for bookmarks."""
    ctx: BoContext = click_ctx.obj
    config = ctx.config_store.load()

    completion = generate_fish_completion(
        config, program=PROGRAM_NAME, subcommands=_visible_subcommands(click_ctx)
    )
    for dangling in completion.dangling_aliases:
        user_output(click.style("Warning: ", fg="yellow") + dangling.message)

    path = Path(output).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(completion.script, encoding="utf-8")
    except OSError as e:
        raise UserFacingCliError(f"Failed to write {path}: {e}") from e
    machine_output(f"Fish completions written to {path}")
