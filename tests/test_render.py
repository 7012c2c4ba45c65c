"""
Tests for starred_repos/render.py.

These tests verify that render functions:
1. Sort stably by star count, most starred first
2. Handle empty data gracefully
3. Print every field of every repo
"""

from io import StringIO

from rich.console import Console

from starred_repos import render
from starred_repos.domain.repo import Repo


def make_repo(name, stars, description="", url=None):
    return Repo(name, url or f"https://github.com/x/{name}", description, stars)


class TestSortByStars:
    """Tests for sort_by_stars."""

    def test_descending(self):
        repos = [make_repo("a", 1), make_repo("b", 300), make_repo("c", 20)]
        assert [r.name for r in render.sort_by_stars(repos)] == ["b", "c", "a"]

    def test_ties_keep_input_order(self):
        repos = [
            make_repo("first", 5),
            make_repo("top", 9),
            make_repo("second", 5),
            make_repo("third", 5),
            make_repo("low", 0),
        ]
        assert [r.name for r in render.sort_by_stars(repos)] == \
            ["top", "first", "second", "third", "low"]

    def test_input_not_modified(self):
        repos = [make_repo("a", 1), make_repo("b", 2)]
        render.sort_by_stars(repos)
        assert [r.name for r in repos] == ["a", "b"]

    def test_empty(self):
        assert render.sort_by_stars([]) == []


class TestListRepos:
    """Tests for list_repos."""

    def test_empty_shows_message(self, capsys):
        render.list_repos([])
        captured = capsys.readouterr()
        assert "No starred repositories found" in captured.out

    def test_prints_all_fields(self, capsys):
        render.list_repos([make_repo("rich", 50000, "Terminal formatting",
                                     "https://github.com/Textualize/rich")])
        out = capsys.readouterr().out

        assert "rich" in out
        assert "Stars:" in out
        assert "50000" in out
        assert "Description:" in out
        assert "Terminal formatting" in out
        assert "URL:" in out
        assert "https://github.com/Textualize/rich" in out

    def test_printed_in_star_order(self, capsys):
        render.list_repos([make_repo("few", 1), make_repo("many", 1000), make_repo("some", 50)])
        out = capsys.readouterr().out

        assert out.index("many") < out.index("some") < out.index("few")

    def test_markup_in_description_is_literal(self):
        buffer = StringIO()
        console = Console(file=buffer, width=200, color_system=None)

        render.list_repos([make_repo("tricky", 1, "uses [bold]brackets[/bold]")], out=console)

        assert "uses [bold]brackets[/bold]" in buffer.getvalue()

    def test_long_fields_are_not_wrapped(self):
        buffer = StringIO()
        console = Console(file=buffer, width=80, color_system=None)
        url = "https://github.com/some-org/" + "a" * 92
        description = "word " * 40

        render.list_repos([make_repo("long", 7, description, url)], out=console)

        lines = buffer.getvalue().splitlines()
        url_line = next(line for line in lines if "URL:" in line)
        desc_line = next(line for line in lines if "Description:" in line)
        assert len(url) == 120
        assert url_line.endswith(url)
        assert desc_line.count("word") == 40
        assert len(lines) == 4
