"""CLI error handling helpers.

Commands raise UserFacingCliError (directly or through Ensure) to stop with
a red ``Error:`` line on stderr and exit code 1.
"""

from typing import TypeVar

import click

from bo.cli.output import user_output
from bo.core.non_ideal_state import NonIdealState

T = TypeVar("T")


class UserFacingCliError(click.ClickException):
    """Error with a message intended for the user, not a traceback."""

    def show(self, file: object = None) -> None:
        user_output(click.style("Error: ", fg="red") + self.message)


class Ensure:
    """Precondition and non-ideal-state checks that exit with user-friendly errors."""

    @staticmethod
    def invariant(condition: bool, message: str) -> None:
        """Ensure condition holds, otherwise raise UserFacingCliError with message."""
        if not condition:
            raise UserFacingCliError(message)

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with its message.

        Example:
            >>> entry = Ensure.ideal_state(resolve_bookmark(config, "github"))
            >>> # entry is now BookmarkEntry, not BookmarkEntry | BookmarkNotFound
        """
        if isinstance(result, NonIdealState):
            raise UserFacingCliError(result.message)
        return result
