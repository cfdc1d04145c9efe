"""Static fish completion script generation.

The script offers subcommands, bookmark names and aliases as first
arguments, each with a short description. Aliases are only offered when
their target bookmark exists.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bo.core.config import BookmarkConfig

logger = logging.getLogger(__name__)

NO_SUBCOMMAND_CONDITION = "__fish_use_subcommand"


@dataclass(frozen=True)
class DanglingAlias:
    """An alias whose target bookmark does not exist."""

    alias: str
    target: str

    @property
    def message(self) -> str:
        return f"Alias '{self.alias}' points to missing bookmark '{self.target}', skipping"


@dataclass(frozen=True)
class FishCompletion:
    """Rendered completion script plus the aliases that were left out."""

    script: str
    dangling_aliases: list[DanglingAlias]


def simplify_url(url: str) -> str:
    """Shorten a URL for display: drop the http(s) scheme and every "www."."""
    if url.startswith("https://"):
        url = url[len("https://") :]
    elif url.startswith("http://"):
        url = url[len("http://") :]
    return url.replace("www.", "")


def quote_fish(value: str) -> str:
    """Single-quote a value for fish, where only \\ and ' need escaping."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _candidate_line(program: str, candidate: str, description: str) -> str:
    return (
        f"complete -c {program} -n {NO_SUBCOMMAND_CONDITION} "
        f"-a {quote_fish(candidate)} -d {quote_fish(description)}"
    )


def generate_fish_completion(
    config: BookmarkConfig,
    *,
    program: str,
    subcommands: Sequence[tuple[str, str]],
) -> FishCompletion:
    """Render the fish completion script for config.

    Args:
        config: Bookmarks and aliases to offer
        program: Command name the completions are registered for
        subcommands: (name, description) pairs for the CLI's subcommands

    Returns:
        FishCompletion with the script text and any skipped dangling aliases
    """
    lines = [
        f"# fish completions for {program}",
        f"complete -c {program} -n {NO_SUBCOMMAND_CONDITION} -f",
    ]

    for name, description in subcommands:
        lines.append(_candidate_line(program, name, description))

    for name, entry in config.bookmarks.items():
        lines.append(_candidate_line(program, name, simplify_url(entry.url)))

    dangling: list[DanglingAlias] = []
    for alias, target in config.aliases.items():
        if target not in config.bookmarks:
            skipped = DanglingAlias(alias=alias, target=target)
            logger.debug(skipped.message)
            dangling.append(skipped)
            continue
        lines.append(_candidate_line(program, alias, simplify_url(config.bookmarks[target].url)))

    return FishCompletion(script="\n".join(lines) + "\n", dangling_aliases=dangling)
