"""Non-ideal states returned (not raised) by lookup operations.

Callers narrow these with ``isinstance`` checks or ``Ensure.ideal_state``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class NonIdealState(ABC):
    """Marker base for results that represent a recoverable failure."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable explanation shown to the user."""
        ...


@dataclass(frozen=True)
class BookmarkNotFound(NonIdealState):
    """No bookmark or alias matched the requested token."""

    token: str

    @property
    def message(self) -> str:
        return f"Bookmark not found: {self.token}"
