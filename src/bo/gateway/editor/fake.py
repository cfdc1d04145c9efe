"""Fake Editor implementation for testing."""

from pathlib import Path

from bo.core.errors import LaunchError
from bo.gateway.editor.abc import Editor


class FakeEditor(Editor):
    """In-memory fake that records edited paths."""

    def __init__(self, *, edit_error: str | None = None) -> None:
        """Create FakeEditor.

        Args:
            edit_error: If set, edit() raises LaunchError with this message
        """
        self._edited_paths: list[Path] = []
        self._edit_error = edit_error

    @property
    def edited_paths(self) -> list[Path]:
        """Get the paths passed to edit().

        This property is for test assertions only.
        """
        return list(self._edited_paths)

    def edit(self, path: Path) -> None:
        if self._edit_error is not None:
            raise LaunchError(self._edit_error)
        self._edited_paths.append(path)
