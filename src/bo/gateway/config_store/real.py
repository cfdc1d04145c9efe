"""Real ConfigStore backed by a TOML file on disk."""

import logging
from collections.abc import MutableMapping, Sequence
from pathlib import Path
from typing import Any, cast

import tomlkit
import tomlkit.exceptions

from bo.core.config import BookmarkConfig, BookmarkEntry, load_config
from bo.core.errors import ConfigError
from bo.gateway.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)


class RealConfigStore(ConfigStore):
    """Production implementation that reads and rewrites config.toml."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def config_path(self) -> Path:
        return self._path

    def load(self) -> BookmarkConfig:
        logger.debug("Loading config from %s", self._path)
        return load_config(self._path)

    def add_bookmark(self, name: str, entry: BookmarkEntry, aliases: Sequence[str]) -> None:
        """Add the bookmark with a single read-modify-write.

        Preserves existing formatting and comments using tomlkit.
        """
        if not self._path.exists():
            raise ConfigError(f"Config file not found: {self._path}")

        try:
            with self._path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        except tomlkit.exceptions.ParseError as e:
            raise ConfigError(f"Failed to parse {self._path}: {e}") from e
        assert isinstance(doc, MutableMapping), f"Expected MutableMapping, got {type(doc)}"
        root = cast(dict[str, Any], doc)

        if "bookmarks" not in root:
            root["bookmarks"] = tomlkit.table(is_super_table=True)
        bookmarks = root["bookmarks"]
        assert isinstance(bookmarks, MutableMapping), type(bookmarks)

        table = tomlkit.table()
        table["url"] = entry.url
        if entry.browser is not None:
            table["browser"] = entry.browser
        cast(dict[str, Any], bookmarks)[name] = table

        if aliases:
            if "aliases" not in root:
                root["aliases"] = tomlkit.table()
            alias_table = root["aliases"]
            assert isinstance(alias_table, MutableMapping), type(alias_table)
            for alias in aliases:
                cast(dict[str, Any], alias_table)[alias] = name

        with self._path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)
        logger.debug("Wrote bookmark %s to %s", name, self._path)
