"""Tests for the completion command."""

from pathlib import Path

from click.testing import CliRunner

from bo.cli.cli import cli
from bo.core.config import BookmarkConfig
from bo.core.context import BoContext
from bo.gateway.config_store import FakeConfigStore


def test_writes_completion_file(bookmark_config: BookmarkConfig, tmp_path: Path) -> None:
    output = tmp_path / "completions" / "bo.fish"
    ctx = BoContext.for_test(config_store=FakeConfigStore(config=bookmark_config))

    result = CliRunner().invoke(cli, ["completion", "--output", str(output)], obj=ctx)

    assert result.exit_code == 0, result.output
    assert f"Fish completions written to {output}" in result.output
    script = output.read_text(encoding="utf-8")
    assert "-a 'github' -d 'github.com'" in script
    assert "-a 'g' -d 'github.com'" in script
    assert "-a 'ddg' -d 'duckduckgo.com/?q={query}'" in script


def test_lists_visible_subcommands(bookmark_config: BookmarkConfig, tmp_path: Path) -> None:
    output = tmp_path / "bo.fish"
    ctx = BoContext.for_test(config_store=FakeConfigStore(config=bookmark_config))

    CliRunner().invoke(cli, ["completion", "-o", str(output)], obj=ctx)

    script = output.read_text(encoding="utf-8")
    for name in ("add", "completion", "edit"):
        assert f"-a '{name}'" in script
    assert "-a 'open'" not in script


def test_dangling_alias_warns_and_continues(
    bookmark_config: BookmarkConfig, tmp_path: Path
) -> None:
    output = tmp_path / "bo.fish"
    ctx = BoContext.for_test(config_store=FakeConfigStore(config=bookmark_config))

    result = CliRunner().invoke(cli, ["completion", "-o", str(output)], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Warning: Alias 'old' points to missing bookmark 'removed'" in result.output
    script = output.read_text(encoding="utf-8")
    assert "-a 'old'" not in script
    assert "-a 'github'" in script


def test_expands_tilde(
    bookmark_config: BookmarkConfig, tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    ctx = BoContext.for_test(config_store=FakeConfigStore(config=bookmark_config))

    result = CliRunner().invoke(cli, ["completion", "-o", "~/fish/bo.fish"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (tmp_path / "fish" / "bo.fish").exists()


def test_unwritable_output_is_reported(bookmark_config: BookmarkConfig, tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    output = blocker / "bo.fish"
    ctx = BoContext.for_test(config_store=FakeConfigStore(config=bookmark_config))

    result = CliRunner().invoke(cli, ["completion", "-o", str(output)], obj=ctx)

    assert result.exit_code == 1
    assert f"Error: Failed to write {output}" in result.output
    assert not isinstance(result.exception, OSError)


def test_dangling_alias_warning_printed_once(
    bookmark_config: BookmarkConfig, tmp_path: Path
) -> None:
    ctx = BoContext.for_test(config_store=FakeConfigStore(config=bookmark_config))

    result = CliRunner().invoke(cli, ["completion", "-o", str(tmp_path / "bo.fish")], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output.count("points to missing bookmark 'removed'") == 1
