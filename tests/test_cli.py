"""CLI behavior tests using Typer's CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from palette.cli import app

runner = CliRunner()


class TestRankCommand:
    def test_lists_visible_actions(self, sdk_actions_file: Path):
        result = runner.invoke(app, ["rank", str(sdk_actions_file)])
        assert result.exit_code == 0
        assert "Open in Browser" in result.output
        assert "Copy URL" in result.output
        assert "Hidden" not in result.output
        assert "3 of 3 action(s)" in result.output

    def test_query_filters(self, sdk_actions_file: Path):
        result = runner.invoke(app, ["rank", str(sdk_actions_file), "copy"])
        assert result.exit_code == 0
        assert "Copy URL" in result.output
        assert "Submit" not in result.output
        assert "1 of 3 action(s)" in result.output

    def test_no_matches(self, sdk_actions_file: Path):
        result = runner.invoke(app, ["rank", str(sdk_actions_file), "zzz"])
        assert result.exit_code == 0
        assert "No actions match your search" in result.output

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["rank", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_unreadable_actions_path(self, tmp_path: Path):
        result = runner.invoke(app, ["rank", str(tmp_path)])
        assert result.exit_code == 1
        assert "Could not read file" in result.output
        assert not isinstance(result.exception, OSError)

    def test_unreadable_config_path(self, sdk_actions_file: Path, tmp_path: Path):
        result = runner.invoke(app, ["rank", str(sdk_actions_file), "--config", str(tmp_path)])
        assert result.exit_code == 1
        assert "Could not read file" in result.output

    def test_invalid_actions(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"description": "no name"}]))
        result = runner.invoke(app, ["rank", str(path)])
        assert result.exit_code == 1
        assert "Invalid actions file" in result.output

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("[{")
        result = runner.invoke(app, ["rank", str(path)])
        assert result.exit_code == 1
        assert "Invalid input" in result.output

    def test_headers_style_from_config(self, tmp_path: Path):
        actions = tmp_path / "actions.json"
        actions.write_text(json.dumps([{"name": "One"}, {"name": "Two"}]))
        config = tmp_path / "dialog.json"
        config.write_text(json.dumps({"section_style": "headers"}))
        result = runner.invoke(app, ["rank", str(actions), "--config", str(config)])
        assert result.exit_code == 0
        assert "2 of 2 action(s)" in result.output


class TestShortcutCommand:
    def test_formats_and_splits(self):
        result = runner.invoke(app, ["shortcut", "cmd+shift+c"])
        assert result.exit_code == 0
        assert "⌘⇧C" in result.output
        assert '["⌘", "⇧", "C"]' in result.output


class TestSlugCommand:
    def test_slug_and_url(self):
        result = runner.invoke(app, ["slug", "Hello World"])
        assert result.exit_code == 0
        assert "hello-world" in result.output
        assert "scriptkit://run/hello-world" in result.output

    def test_custom_scheme(self):
        result = runner.invoke(app, ["slug", "Hello World", "--scheme", "kit"])
        assert "kit://run/hello-world" in result.output

    def test_no_slug_possible(self):
        result = runner.invoke(app, ["slug", "!!!"])
        assert result.exit_code == 1
