"""Fake Picker implementation for testing."""

from collections.abc import Sequence

from bo.gateway.picker.abc import Picker
from bo.gateway.picker.types import PickerAborted, PickerItem


class FakePicker(Picker):
    """Scripted picker that records what it was offered.

    Selection is decided at construction time: pick by label, abort, or
    select nothing.
    """

    def __init__(self, *, select_label: str | None = None, abort: bool = False) -> None:
        """Create FakePicker.

        Args:
            select_label: Label to select. If no offered item has this label,
                a new item is returned whose name is the label itself, the
                same as a picker echoing back arbitrary text.
            abort: If True, select() returns PickerAborted
        """
        self._select_label = select_label
        self._abort = abort
        self._offered: list[list[PickerItem]] = []

    @property
    def offered(self) -> list[list[PickerItem]]:
        """Get the item lists passed to select(), one per call.

        This property is for test assertions only.
        """
        return [list(items) for items in self._offered]

    def select(self, items: Sequence[PickerItem]) -> PickerItem | PickerAborted | None:
        self._offered.append(list(items))
        if self._abort:
            return PickerAborted()
        if self._select_label is None:
            return None
        for item in items:
            if item.label == self._select_label:
                return item
        return PickerItem(label=self._select_label, name=self._select_label)
