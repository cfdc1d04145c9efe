"""Real UrlOpener implementation that spawns the browser process."""

import logging
import subprocess
import sys

from bo.core.errors import LaunchError
from bo.gateway.opener.abc import UrlOpener

logger = logging.getLogger(__name__)


def build_open_command(url: str, browser: str, *, platform: str) -> list[str]:
    """Build the argument list that opens url with browser on platform.

    macOS resolves application names through `open -a`; elsewhere the
    browser is run directly as an executable.
    """
    if platform == "darwin":
        return ["open", "-a", browser, url]
    return [browser, url]


class RealUrlOpener(UrlOpener):
    """Production implementation that starts a detached browser process."""

    def open(self, url: str, browser: str) -> None:
        cmd = build_open_command(url, browser, platform=sys.platform)
        logger.debug("Opening %s with %s", url, browser)
        try:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise LaunchError(f"Failed to open {url} in {browser}: {e}") from e
