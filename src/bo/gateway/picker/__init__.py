"""Interactive single-item selection."""

from bo.gateway.picker.abc import Picker as Picker
from bo.gateway.picker.fake import FakePicker as FakePicker
from bo.gateway.picker.real import FzfPicker as FzfPicker
from bo.gateway.picker.types import PickerAborted as PickerAborted
from bo.gateway.picker.types import PickerItem as PickerItem
