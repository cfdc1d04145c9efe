"""fzf-backed Picker implementation."""

import logging
import subprocess
from collections.abc import Sequence

from bo.core.errors import LaunchError
from bo.gateway.picker.abc import Picker
from bo.gateway.picker.types import PickerAborted, PickerItem

logger = logging.getLogger(__name__)

# fzf exit statuses
FZF_NO_MATCH = 1
FZF_INTERRUPTED = 130

FZF_HEIGHT = "5"


def interpret_fzf_result(
    returncode: int, stdout: str, items: Sequence[PickerItem]
) -> PickerItem | PickerAborted | None:
    """Map an fzf exit status and output line back to a picker result.

    Args:
        returncode: fzf exit status
        stdout: fzf standard output (the selected line, if any)
        items: Items that were offered, used to recover the selected item

    Returns:
        The selected item, PickerAborted on interrupt, or None when nothing
        was selected

    Raises:
        LaunchError: If fzf exited with an unexpected status
    """
    if returncode == FZF_INTERRUPTED:
        return PickerAborted()
    if returncode == FZF_NO_MATCH:
        return None
    if returncode != 0:
        raise LaunchError(f"fzf failed with exit status {returncode}")

    selected = stdout.rstrip("\n")
    if not selected:
        return None
    for item in items:
        if item.label == selected:
            return item
    # Not one of ours; keep the label so it can still be resolved by name.
    return PickerItem(label=selected, name=selected)


class FzfPicker(Picker):
    """Production implementation that runs fzf on the terminal.

    Labels are written to fzf's stdin; the chosen line comes back on stdout
    and is mapped back to its item. fzf draws on /dev/tty, so stderr is not
    captured.
    """

    def select(self, items: Sequence[PickerItem]) -> PickerItem | PickerAborted | None:
        try:
            result = subprocess.run(
                ["fzf", "--height", FZF_HEIGHT, "--no-multi"],
                input="\n".join(item.label for item in items),
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            raise LaunchError(f"Failed to run fzf: {e}") from e

        logger.debug("fzf exited with status %d", result.returncode)
        return interpret_fzf_result(result.returncode, result.stdout, items)
