"""Fake ConfigStore implementation for testing.

FakeConfigStore keeps the config in memory and never touches the
filesystem.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path

from bo.core.config import BookmarkConfig, BookmarkEntry
from bo.core.errors import ConfigError
from bo.gateway.config_store.abc import ConfigStore


@dataclass(frozen=True)
class AddedBookmark:
    """Record of an add_bookmark call for test assertions."""

    name: str
    entry: BookmarkEntry
    aliases: tuple[str, ...]


class FakeConfigStore(ConfigStore):
    """In-memory fake implementation that tracks mutations.

    This class has NO public setup methods beyond the constructor.
    """

    def __init__(
        self,
        *,
        config: BookmarkConfig | None = None,
        config_path: Path | None = None,
        load_error: str | None = None,
    ) -> None:
        """Create FakeConfigStore with optional initial state.

        Args:
            config: Initial config (None = config file does not exist)
            config_path: Path reported by config_path() (defaults to /fake/bo/config.toml)
            load_error: If set, load() raises ConfigError with this message
        """
        self._config = config
        self._config_path = (
            config_path if config_path is not None else Path("/fake/bo/config.toml")
        )
        self._load_error = load_error
        self._added: list[AddedBookmark] = []

    @property
    def added(self) -> list[AddedBookmark]:
        """Get the bookmarks that were added.

        This property is for test assertions only.
        """
        return list(self._added)

    @property
    def current_config(self) -> BookmarkConfig | None:
        """Get current config state.

        This property is for test assertions only.
        """
        return self._config

    def config_path(self) -> Path:
        return self._config_path

    def load(self) -> BookmarkConfig:
        if self._load_error is not None:
            raise ConfigError(self._load_error)
        if self._config is None:
            raise ConfigError(f"Config file not found: {self._config_path}")
        return self._config

    def add_bookmark(self, name: str, entry: BookmarkEntry, aliases: Sequence[str]) -> None:
        config = self.load()
        self._config = replace(
            config,
            bookmarks={**config.bookmarks, name: entry},
            aliases={**config.aliases, **{alias: name for alias in aliases}},
        )
        self._added.append(AddedBookmark(name=name, entry=entry, aliases=tuple(aliases)))
