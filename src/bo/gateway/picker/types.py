"""Types exchanged with the picker gateway."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PickerItem:
    """A display label tagged with the bookmark name it was rendered from."""

    label: str
    name: str


@dataclass(frozen=True)
class PickerAborted:
    """Sentinel returned when the user cancels the picker."""
