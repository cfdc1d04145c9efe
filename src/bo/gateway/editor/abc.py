"""Editor abstraction for testing."""

from abc import ABC, abstractmethod
from pathlib import Path


class Editor(ABC):
    """Abstract interactive editor launcher."""

    @abstractmethod
    def edit(self, path: Path) -> None:
        """Open path in the user's editor and wait for it to exit.

        Raises:
            LaunchError: If the editor could not be started
        """
        ...
