"""Click group that routes bookmark names to the default command."""

import click

from bo.cli.ensure import UserFacingCliError
from bo.core.errors import BoError


def _first_positional_index(args: list[str], value_options: set[str]) -> int | None:
    """Find the first argument that is neither an option nor an option's value."""
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            return index + 1 if index + 1 < len(args) else None
        if arg.startswith("-") and len(arg) > 1:
            index += 2 if arg in value_options else 1
            continue
        return index
    return None


class BookmarkGroup(click.Group):
    """Group whose first positional is a subcommand or a bookmark name.

    ``bo github`` and ``bo ddg some words`` are rewritten to
    ``bo open github`` and ``bo open ddg some words``. Subcommand names win
    over bookmark names with the same spelling.

    BoError raised anywhere below the group is reported as a user-facing
    error instead of a traceback.
    """

    default_command = "open"

    def _value_options(self) -> set[str]:
        opts: set[str] = set()
        for param in self.params:
            if isinstance(param, click.Option) and not param.is_flag and not param.count:
                opts.update(param.opts)
                opts.update(param.secondary_opts)
        return opts

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        index = _first_positional_index(args, self._value_options())
        if index is not None and args[index] not in self.commands:
            args = [*args[:index], self.default_command, *args[index:]]
        return super().parse_args(ctx, args)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except BoError as e:
            raise UserFacingCliError(str(e)) from e
