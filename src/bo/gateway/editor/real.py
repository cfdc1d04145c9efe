"""Real Editor implementation driven by $EDITOR."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

from bo.core.errors import LaunchError
from bo.gateway.editor.abc import Editor

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vi"


def build_editor_command(editor: str | None, path: Path) -> list[str]:
    """Build the editor argument list.

    $EDITOR may carry its own flags (e.g. ``code --wait``), so it is split
    shell-style before the path is appended.
    """
    if not editor:
        editor = DEFAULT_EDITOR
    return [*shlex.split(editor), str(path)]


class RealEditor(Editor):
    """Production implementation that runs $EDITOR in the foreground."""

    def edit(self, path: Path) -> None:
        cmd = build_editor_command(os.environ.get("EDITOR"), path)
        logger.debug("Running editor: %s", cmd)
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            raise LaunchError(f"Failed to start editor '{cmd[0]}': {e}") from e
        if result.returncode != 0:
            logger.debug("Editor exited with status %d", result.returncode)
