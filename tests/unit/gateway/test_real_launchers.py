"""Tests for the real picker, opener and editor gateways."""

import sys
from pathlib import Path

import pytest

from bo.core.errors import LaunchError
from bo.gateway.editor import RealEditor
from bo.gateway.opener import RealUrlOpener
from bo.gateway.picker import FzfPicker, PickerAborted, PickerItem
from bo.gateway.picker.real import interpret_fzf_result

ITEMS = [
    PickerItem(label="ddg: https://duckduckgo.com (in chromium)", name="ddg"),
    PickerItem(label="github: https://github.com (in firefox)", name="github"),
]


class TestInterpretFzfResult:
    def test_selection_returns_offered_item(self) -> None:
        result = interpret_fzf_result(0, "github: https://github.com (in firefox)\n", ITEMS)

        assert result == ITEMS[1]

    def test_unknown_line_keeps_label_as_name(self) -> None:
        result = interpret_fzf_result(0, "typed text\n", ITEMS)

        assert result == PickerItem(label="typed text", name="typed text")

    def test_empty_output_is_no_selection(self) -> None:
        assert interpret_fzf_result(0, "\n", ITEMS) is None

    def test_no_match_is_no_selection(self) -> None:
        assert interpret_fzf_result(1, "", ITEMS) is None

    def test_interrupt_is_abort(self) -> None:
        assert interpret_fzf_result(130, "", ITEMS) == PickerAborted()

    def test_other_status_raises(self) -> None:
        with pytest.raises(LaunchError, match="exit status 2"):
            interpret_fzf_result(2, "", ITEMS)


class TestMissingExecutables:
    def test_fzf_missing_raises(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("PATH", str(tmp_path))

        with pytest.raises(LaunchError, match="Failed to run fzf"):
            FzfPicker().select(ITEMS)

    @pytest.mark.skipif(sys.platform == "darwin", reason="macOS opens browsers via `open -a`")
    def test_browser_missing_raises(self, tmp_path: Path) -> None:
        browser = str(tmp_path / "no-such-browser")

        with pytest.raises(LaunchError, match="Failed to open https://a.com"):
            RealUrlOpener().open("https://a.com", browser)

    def test_editor_missing_raises(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("EDITOR", str(tmp_path / "no-such-editor"))

        with pytest.raises(LaunchError, match="Failed to start editor"):
            RealEditor().edit(tmp_path / "config.toml")
