"""
Tests for JSON/TOML export.
"""

import json
import tomllib
from unittest.mock import patch

import pytest

from starred_repos.domain.repo import Repo
from starred_repos.exit_codes import DeserializationError
from starred_repos.render import sort_by_stars
from starred_repos.services.export_service import (
    export_json,
    export_toml,
    load_json,
    load_toml,
)


REPOS = [
    Repo("small", "https://github.com/a/small", "A small one", 3),
    Repo("big", "https://github.com/a/big", 'Quotes "and" \\ backslashes', 900),
    Repo("empty-desc", "https://github.com/a/empty-desc", "", 3),
    Repo("unicode", "https://github.com/a/unicode", "日本語 ✨", 42),
]


class TestExportJson:
    """Tests for export_json and load_json."""

    def test_writes_array_in_given_order(self, tmp_path):
        path = tmp_path / "stars.json"

        assert export_json(REPOS, path) is True

        data = json.loads(path.read_text(encoding="utf-8"))
        assert isinstance(data, list)
        assert [item["name"] for item in data] == ["small", "big", "empty-desc", "unicode"]
        assert set(data[0]) == {"name", "html_url", "description", "stargazers_count"}

    def test_reads_back_same_records(self, tmp_path):
        path = tmp_path / "stars.json"
        export_json(REPOS, path)

        assert load_json(path) == REPOS

    def test_independent_of_display_order(self, tmp_path):
        path = tmp_path / "stars.json"
        sort_by_stars(REPOS)
        export_json(REPOS, path)

        assert load_json(path) == REPOS

    def test_empty_list(self, tmp_path):
        path = tmp_path / "stars.json"
        export_json([], path)
        assert load_json(path) == []

    def test_write_failure_is_logged(self, tmp_path, caplog):
        path = tmp_path / "missing-dir" / "stars.json"

        assert export_json(REPOS, path) is False
        assert "Writing to" in caplog.text

    def test_load_rejects_non_array(self, tmp_path):
        path = tmp_path / "stars.json"
        path.write_text('{"name": "x"}')

        with pytest.raises(DeserializationError):
            load_json(path)


class TestExportToml:
    """Tests for export_toml and load_toml."""

    def test_writes_repos_tables(self, tmp_path):
        path = tmp_path / "stars.toml"

        assert export_toml(REPOS, path) is True

        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert [item["name"] for item in data["repos"]] == ["small", "big", "empty-desc", "unicode"]
        assert data["repos"][1]["stargazers_count"] == 900

    def test_reads_back_same_records(self, tmp_path):
        path = tmp_path / "stars.toml"
        export_toml(REPOS, path)

        assert load_toml(path) == REPOS

    def test_json_and_toml_agree(self, tmp_path):
        export_json(REPOS, tmp_path / "stars.json")
        export_toml(REPOS, tmp_path / "stars.toml")

        assert load_json(tmp_path / "stars.json") == load_toml(tmp_path / "stars.toml")

    def test_empty_list(self, tmp_path):
        path = tmp_path / "stars.toml"
        export_toml([], path)
        assert load_toml(path) == []

    def test_control_characters_read_back(self, tmp_path):
        path = tmp_path / "stars.toml"
        repos = [
            Repo("ctrl", "https://github.com/a/ctrl", "ctrl \x01 \x7f \x1b end", 3),
            Repo("ws", "https://github.com/a/ws", "tab\tnew\nline\r\n", 1),
        ]

        assert export_toml(repos, path) is True
        assert load_toml(path) == repos

    def test_lossy_document_is_not_written(self, tmp_path, caplog):
        path = tmp_path / "stars.toml"

        with patch("starred_repos.services.export_service.toml.dumps",
                   return_value='[[repos]]\nname = "other"\n'):
            assert export_toml(REPOS, path) is False

        assert "Failed serializing toml" in caplog.text
        assert not path.exists()

    def test_serialization_failure_is_logged(self, tmp_path, caplog):
        path = tmp_path / "stars.toml"

        with patch("starred_repos.services.export_service.toml.dumps",
                   side_effect=TypeError("boom")):
            assert export_toml(REPOS, path) is False

        assert "Failed serializing toml" in caplog.text
        assert not path.exists()

    def test_write_failure_is_logged(self, tmp_path, caplog):
        assert export_toml(REPOS, tmp_path) is False
        assert "Writing to" in caplog.text

    def test_load_invalid_toml(self, tmp_path):
        path = tmp_path / "stars.toml"
        path.write_text("repos = [")

        with pytest.raises(DeserializationError):
            load_toml(path)
