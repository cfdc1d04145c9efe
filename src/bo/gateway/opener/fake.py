"""Fake UrlOpener implementation for testing.

FakeUrlOpener records every open call in memory, enabling fast and
deterministic tests without launching a browser.
"""

from dataclasses import dataclass

from bo.core.errors import LaunchError
from bo.gateway.opener.abc import UrlOpener


@dataclass(frozen=True)
class OpenCall:
    """Record of a single open call for test assertions."""

    url: str
    browser: str


class FakeUrlOpener(UrlOpener):
    """In-memory fake that tracks open calls.

    This class has NO public setup methods. All state is provided via the
    constructor or captured during execution.
    """

    def __init__(self, *, open_error: str | None = None) -> None:
        """Create FakeUrlOpener.

        Args:
            open_error: If set, open() raises LaunchError with this message.
                Use to simulate a missing browser binary.
        """
        self._open_calls: list[OpenCall] = []
        self._open_error = open_error

    @property
    def open_calls(self) -> list[OpenCall]:
        """Get the open calls that were made.

        Returns a copy to prevent external mutation.
        This property is for test assertions only.
        """
        return list(self._open_calls)

    def open(self, url: str, browser: str) -> None:
        if self._open_error is not None:
            raise LaunchError(self._open_error)
        self._open_calls.append(OpenCall(url=url, browser=browser))
