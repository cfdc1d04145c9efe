"""Resolve user-supplied tokens to bookmark entries.

A token is a bookmark name, an alias, or a full picker label such as
``github: https://github.com (in firefox)``. Labels are reduced back to
their leading name before lookup.
"""

import re

from bo.core.config import BookmarkConfig, BookmarkEntry
from bo.core.non_ideal_state import BookmarkNotFound

# Anchored at end of string so names that merely contain ": http" are untouched.
_PICKER_LABEL_SUFFIX = re.compile(r":\shttp.+\s\(in\s([\w.-]+)\)$")


def strip_picker_label(token: str) -> str:
    """Reduce a rendered picker label to its name, then trim whitespace."""
    return _PICKER_LABEL_SUFFIX.sub("", token, count=1).strip()


def resolve_bookmark(config: BookmarkConfig, token: str) -> BookmarkEntry | BookmarkNotFound:
    """Look up a token by bookmark name first, then by alias.

    Args:
        config: Bookmark configuration to search
        token: Name, alias, or picker label

    Returns:
        The matching BookmarkEntry, or BookmarkNotFound carrying the original
        token (including dangling aliases whose target does not exist)
    """
    name = strip_picker_label(token)

    if name in config.bookmarks:
        return config.bookmarks[name]

    target = config.aliases.get(name)
    if target is not None and target in config.bookmarks:
        return config.bookmarks[target]

    return BookmarkNotFound(token=token)
