"""Open bookmarks, optionally substituting query words into the URL."""

import logging
from collections.abc import Sequence

from bo.core.config import BookmarkConfig, BookmarkEntry
from bo.gateway.opener import UrlOpener

logger = logging.getLogger(__name__)

QUERY_PLACEHOLDER = "{query}"


def build_query_url(url: str, words: Sequence[str]) -> str:
    """Replace every {query} placeholder in url with the space-joined words.

    URLs without the placeholder are returned unchanged.
    """
    if QUERY_PLACEHOLDER not in url:
        return url
    return url.replace(QUERY_PLACEHOLDER, " ".join(words))


def open_bookmark(opener: UrlOpener, config: BookmarkConfig, entry: BookmarkEntry) -> None:
    """Open entry's URL as-is in its effective browser."""
    opener.open(entry.url, config.effective_browser(entry))


def search_bookmark(
    opener: UrlOpener,
    config: BookmarkConfig,
    entry: BookmarkEntry,
    words: Sequence[str],
) -> None:
    """Open entry with words substituted into its query template.

    Not every bookmark takes a query; without a placeholder this is a plain
    open and the words are dropped.
    """
    if QUERY_PLACEHOLDER not in entry.url:
        logger.debug("No %s in %s, ignoring query words %r", QUERY_PLACEHOLDER, entry.url, words)
        open_bookmark(opener, config, entry)
        return
    opener.open(build_query_url(entry.url, words), config.effective_browser(entry))
