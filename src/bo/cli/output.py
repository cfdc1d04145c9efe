"""Output helpers that keep user messages and machine output apart.

user_output goes to stderr so that stdout only carries results a script
might consume.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message for the user on stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print a result on stdout."""
    click.echo(message)
