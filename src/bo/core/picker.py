"""Interactive bookmark selection.

Each bookmark is offered as ``<name>: <url> (in <browser>)``. The picker
hands back the item, which carries the bookmark name next to its label,
so the chosen bookmark is known without re-parsing the label.
"""

import logging
from collections.abc import Sequence
from typing import Literal

from bo.core.config import BookmarkConfig, BookmarkEntry
from bo.core.launcher import open_bookmark
from bo.core.non_ideal_state import BookmarkNotFound
from bo.core.resolver import resolve_bookmark
from bo.gateway.opener import UrlOpener
from bo.gateway.picker import Picker, PickerAborted, PickerItem

logger = logging.getLogger(__name__)

PickOutcome = Literal["opened", "aborted", "empty"]


def format_picker_label(name: str, entry: BookmarkEntry, browser: str) -> str:
    return f"{name}: {entry.url} (in {browser})"


def build_picker_items(config: BookmarkConfig) -> list[PickerItem]:
    """Build one picker item per bookmark, in bookmark order."""
    return [
        PickerItem(
            label=format_picker_label(name, entry, config.effective_browser(entry)),
            name=name,
        )
        for name, entry in config.bookmarks.items()
    ]


def resolve_picked(
    config: BookmarkConfig, item: PickerItem, offered: Sequence[PickerItem]
) -> BookmarkEntry | BookmarkNotFound:
    """Resolve a picked item to its bookmark.

    Items that were offered carry their exact bookmark name, so the label is
    not consulted. Anything else is resolved by label, then by tagged name.
    """
    if item in offered and item.name in config.bookmarks:
        return config.bookmarks[item.name]

    result = resolve_bookmark(config, item.label)
    if isinstance(result, BookmarkNotFound) and item.name != item.label:
        return resolve_bookmark(config, item.name)
    return result


def pick_and_open(
    config: BookmarkConfig, picker: Picker, opener: UrlOpener
) -> PickOutcome | BookmarkNotFound:
    """Let the user pick a bookmark and open it.

    Returns:
        "opened" after a successful open, "aborted" if the user cancelled,
        "empty" if there was nothing to pick or nothing was picked, or
        BookmarkNotFound if the selection no longer matches a bookmark
    """
    items = build_picker_items(config)
    if not items:
        logger.debug("No bookmarks to pick from")
        return "empty"

    selection = picker.select(items)
    if isinstance(selection, PickerAborted):
        return "aborted"
    if selection is None:
        return "empty"

    result = resolve_picked(config, selection, items)
    if isinstance(result, BookmarkNotFound):
        return result

    open_bookmark(opener, config, result)
    return "opened"
