"""Shared fixtures for bo tests."""

import pytest

from bo.core.config import BookmarkConfig, BookmarkEntry


@pytest.fixture
def bookmark_config() -> BookmarkConfig:
    """Config with a plain bookmark, a query bookmark, a valid and a dangling alias."""
    return BookmarkConfig(
        default_browser="firefox",
        aliases={"g": "github", "old": "removed"},
        bookmarks={
            "ddg": BookmarkEntry(url="https://duckduckgo.com/?q={query}", browser="chromium"),
            "github": BookmarkEntry(url="https://www.github.com", browser=None),
        },
    )
