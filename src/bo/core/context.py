"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from bo.core.config import default_config_path
from bo.gateway.config_store import ConfigStore, RealConfigStore
from bo.gateway.editor import Editor, RealEditor
from bo.gateway.opener import RealUrlOpener, UrlOpener
from bo.gateway.picker import FzfPicker, Picker


@dataclass(frozen=True)
class BoContext:
    """Immutable context holding all dependencies for bo operations.

    Created at the CLI entry point and threaded through commands via
    click's ``ctx.obj``. Frozen to prevent accidental modification at
    runtime.
    """

    config_store: ConfigStore
    opener: UrlOpener
    picker: Picker
    editor: Editor

    @staticmethod
    def for_test(
        config_store: ConfigStore | None = None,
        opener: UrlOpener | None = None,
        picker: Picker | None = None,
        editor: Editor | None = None,
    ) -> "BoContext":
        """Create a context where every unspecified dependency is a fake.

        Example:
            >>> from bo.gateway.opener import FakeUrlOpener
            >>> opener = FakeUrlOpener()
            >>> ctx = BoContext.for_test(opener=opener)
        """
        from bo.gateway.config_store import FakeConfigStore
        from bo.gateway.editor import FakeEditor
        from bo.gateway.opener import FakeUrlOpener
        from bo.gateway.picker import FakePicker

        return BoContext(
            config_store=config_store if config_store is not None else FakeConfigStore(),
            opener=opener if opener is not None else FakeUrlOpener(),
            picker=picker if picker is not None else FakePicker(),
            editor=editor if editor is not None else FakeEditor(),
        )


def create_context(*, config_path: Path | None) -> BoContext:
    """Create the production context.

    Args:
        config_path: Explicit config file path, or None for the default
            location under $XDG_CONFIG_HOME
    """
    path = config_path if config_path is not None else default_config_path()
    return BoContext(
        config_store=RealConfigStore(path),
        opener=RealUrlOpener(),
        picker=FzfPicker(),
        editor=RealEditor(),
    )
