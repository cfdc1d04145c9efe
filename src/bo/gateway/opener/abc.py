"""URL opener abstraction for testing.

This module provides an ABC for launching a browser so that tests can
verify what would be opened without spawning any process.
"""

from abc import ABC, abstractmethod


class UrlOpener(ABC):
    """Abstract browser launcher for dependency injection."""

    @abstractmethod
    def open(self, url: str, browser: str) -> None:
        """Open url in the named browser.

        Args:
            url: URL to open, passed through unchanged
            browser: Browser application or executable name

        Raises:
            LaunchError: If the browser could not be started
        """
        ...
