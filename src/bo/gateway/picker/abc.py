"""Picker abstraction for testing.

Selection UIs take over the terminal, so commands depend on this ABC and
tests substitute FakePicker.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from bo.gateway.picker.types import PickerAborted, PickerItem


class Picker(ABC):
    """Abstract single-selection picker."""

    @abstractmethod
    def select(self, items: Sequence[PickerItem]) -> PickerItem | PickerAborted | None:
        """Let the user pick at most one item.

        Args:
            items: Items to offer, in display order

        Returns:
            The selected item, PickerAborted if the user cancelled, or None
            if nothing was selected

        Raises:
            LaunchError: If the picker program could not be run
        """
        ...
