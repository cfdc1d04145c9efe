"""Tests for routing bookmark names to the default command."""

from bo.cli.group import _first_positional_index

VALUE_OPTIONS = {"--config", "-c"}


class TestFirstPositionalIndex:
    def test_no_args(self) -> None:
        assert _first_positional_index([], VALUE_OPTIONS) is None

    def test_name_first(self) -> None:
        assert _first_positional_index(["github"], VALUE_OPTIONS) == 0

    def test_skips_option_value(self) -> None:
        assert _first_positional_index(["-c", "x.toml", "github"], VALUE_OPTIONS) == 2

    def test_skips_inline_option_value(self) -> None:
        assert _first_positional_index(["--config=x.toml", "github"], VALUE_OPTIONS) == 1

    def test_skips_flags(self) -> None:
        assert _first_positional_index(["--debug", "github"], VALUE_OPTIONS) == 1

    def test_only_options(self) -> None:
        assert _first_positional_index(["--debug", "-c", "x.toml"], VALUE_OPTIONS) is None

    def test_double_dash(self) -> None:
        assert _first_positional_index(["--", "-weird"], VALUE_OPTIONS) == 1
