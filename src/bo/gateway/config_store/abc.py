"""Abstract base class for bookmark config storage.

ConfigStore isolates where the config lives and how it is written, so
commands and tests can work against an in-memory BookmarkConfig.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from bo.core.config import BookmarkConfig, BookmarkEntry


class ConfigStore(ABC):
    """Abstract interface for reading and updating the bookmark config."""

    @abstractmethod
    def config_path(self) -> Path:
        """Get the path of the config file (used for editing and messages)."""
        ...

    @abstractmethod
    def load(self) -> BookmarkConfig:
        """Load the bookmark config.

        Raises:
            ConfigError: If the config is missing or invalid
        """
        ...

    @abstractmethod
    def add_bookmark(self, name: str, entry: BookmarkEntry, aliases: Sequence[str]) -> None:
        """Append a bookmark, and aliases pointing at it, to the config.

        Callers are responsible for rejecting names and aliases that already
        exist.

        Args:
            name: New bookmark name
            entry: URL and optional browser for the bookmark
            aliases: Alias names to map to the new bookmark
        """
        ...
