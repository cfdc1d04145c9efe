"""Bookmark configuration model and TOML parsing.

Example config.toml:

    default_browser = "firefox"

    [aliases]
    g = "github"

    [bookmarks.github]
    url = "https://github.com"

    [bookmarks.ddg]
    url = "https://duckduckgo.com/?q={query}"
    browser = "chromium"
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bo.core.errors import ConfigError

APP_NAME = "bo"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True)
class BookmarkEntry:
    """A single bookmark: a URL and an optional browser override."""

    url: str
    browser: str | None


@dataclass(frozen=True)
class BookmarkConfig:
    """In-memory representation of the bookmark file.

    Alias targets are not checked here. A dangling alias is detected by
    whoever consumes it (resolution reports not-found, completion skips it).
    """

    default_browser: str
    aliases: dict[str, str]
    bookmarks: dict[str, BookmarkEntry]

    def effective_browser(self, entry: BookmarkEntry) -> str:
        """Return the entry's browser override, or the default browser."""
        if entry.browser is not None:
            return entry.browser
        return self.default_browser


def default_config_path() -> Path:
    """Return $XDG_CONFIG_HOME/bo/config.toml, defaulting to ~/.config."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME / CONFIG_FILE_NAME


def _parse_entry(name: str, raw: Any, source: Path) -> BookmarkEntry:
    if not isinstance(raw, dict):
        raise ConfigError(f"Bookmark '{name}' in {source} must be a table")

    url = raw.get("url")
    if not isinstance(url, str):
        raise ConfigError(f"Bookmark '{name}' in {source} is missing a string 'url'")

    browser = raw.get("browser")
    if browser is not None and not isinstance(browser, str):
        raise ConfigError(f"Bookmark '{name}' in {source} has a non-string 'browser'")

    return BookmarkEntry(url=url, browser=browser)


def _parse_aliases(raw: Any, source: Path) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'aliases' in {source} must be a table")

    aliases: dict[str, str] = {}
    for alias in sorted(raw):
        target = raw[alias]
        if not isinstance(target, str):
            raise ConfigError(f"Alias '{alias}' in {source} must map to a bookmark name")
        aliases[alias] = target
    return aliases


def parse_config(content: str, *, source: Path) -> BookmarkConfig:
    """Parse config.toml content into a BookmarkConfig.

    Bookmarks and aliases are ordered by name.

    Args:
        content: Raw TOML text
        source: Path the text was read from, used in error messages

    Returns:
        Parsed BookmarkConfig

    Raises:
        ConfigError: If the TOML is malformed or required fields are missing
    """
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {source}: {e}") from e

    default_browser = data.get("default_browser")
    if not isinstance(default_browser, str) or not default_browser:
        raise ConfigError(f"Missing 'default_browser' in {source}")

    raw_bookmarks = data.get("bookmarks")
    if not isinstance(raw_bookmarks, dict):
        raise ConfigError(f"Missing 'bookmarks' table in {source}")

    bookmarks = {
        name: _parse_entry(name, raw_bookmarks[name], source) for name in sorted(raw_bookmarks)
    }

    return BookmarkConfig(
        default_browser=default_browser,
        aliases=_parse_aliases(data.get("aliases"), source),
        bookmarks=bookmarks,
    )


def load_config(path: Path) -> BookmarkConfig:
    """Read and parse the config file at path.

    Raises:
        ConfigError: If the file does not exist, cannot be read, or cannot be parsed
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    return parse_config(content, source=path)
