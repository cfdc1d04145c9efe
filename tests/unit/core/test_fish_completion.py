"""Tests for fish completion generation."""

from bo.core.completion import (
    DanglingAlias,
    generate_fish_completion,
    quote_fish,
    simplify_url,
)
from bo.core.config import BookmarkConfig, BookmarkEntry

SUBCOMMANDS = [("add", "Add a bookmark"), ("completion", "Generate fish shell completions")]


class TestSimplifyUrl:
    def test_strips_https_and_www(self) -> None:
        assert simplify_url("https://www.example.com/x") == "example.com/x"

    def test_strips_http(self) -> None:
        assert simplify_url("http://example.com") == "example.com"

    def test_removes_every_www(self) -> None:
        assert simplify_url("https://www.a.com/www.b") == "a.com/b"

    def test_leaves_other_schemes(self) -> None:
        assert simplify_url("ftp://www.a.com") == "ftp://a.com"

    def test_scheme_only_stripped_at_start(self) -> None:
        assert simplify_url("a.com/?r=https://b.com") == "a.com/?r=https://b.com"


class TestQuoteFish:
    def test_wraps_in_single_quotes(self) -> None:
        assert quote_fish("github.com") == "'github.com'"

    def test_escapes_quote_and_backslash(self) -> None:
        assert quote_fish("it's a\\b") == "'it\\'s a\\\\b'"


class TestGenerateFishCompletion:
    def test_renders_subcommands_bookmarks_and_aliases(
        self, bookmark_config: BookmarkConfig
    ) -> None:
        result = generate_fish_completion(bookmark_config, program="bo", subcommands=SUBCOMMANDS)

        assert result.script.splitlines() == [
            "# fish completions for bo",
            "complete -c bo -n __fish_use_subcommand -f",
            "complete -c bo -n __fish_use_subcommand -a 'add' -d 'Add a bookmark'",
            "complete -c bo -n __fish_use_subcommand -a 'completion' "
            "-d 'Generate fish shell completions'",
            "complete -c bo -n __fish_use_subcommand -a 'ddg' -d 'duckduckgo.com/?q={query}'",
            "complete -c bo -n __fish_use_subcommand -a 'github' -d 'github.com'",
            "complete -c bo -n __fish_use_subcommand -a 'g' -d 'github.com'",
        ]
        assert result.script.endswith("\n")

    def test_dangling_alias_is_reported_and_skipped(
        self, bookmark_config: BookmarkConfig
    ) -> None:
        result = generate_fish_completion(bookmark_config, program="bo", subcommands=[])

        assert result.dangling_aliases == [DanglingAlias(alias="old", target="removed")]
        assert "'old'" not in result.script

    def test_no_aliases(self) -> None:
        config = BookmarkConfig(
            default_browser="firefox",
            aliases={},
            bookmarks={"a": BookmarkEntry(url="http://www.a.com", browser=None)},
        )

        result = generate_fish_completion(config, program="bo", subcommands=[])

        assert result.dangling_aliases == []
        assert result.script.splitlines()[-1] == (
            "complete -c bo -n __fish_use_subcommand -a 'a' -d 'a.com'"
        )
