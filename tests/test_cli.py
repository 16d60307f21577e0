"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from momentum.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def data_dir(tmp_path):
    return str(tmp_path / "data")


class TestCli:

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "momentum v" in result.stdout

    def test_gift(self):
        result = runner.invoke(app, ["gift", "wedding", "family"])
        assert result.exit_code == 0
        assert "150,000" in result.stdout

    def test_parse_date(self):
        result = runner.invoke(app, ["parse-date", "Party on 2025-03-15"])
        assert result.exit_code == 0
        assert "2025-03-15" in result.stdout
        assert "0.95" in result.stdout

    def test_parse_date_none(self):
        result = runner.invoke(app, ["parse-date", "sometime"])
        assert result.exit_code == 0
        assert "No date found" in result.stdout


class TestTaskCommands:

    def test_add_list_done(self, data_dir):
        result = runner.invoke(app, ["--data-dir", data_dir, "task", "add", "Buy flowers", "-p", "high"])
        assert result.exit_code == 0
        assert "Added task" in result.stdout

        result = runner.invoke(app, ["--data-dir", data_dir, "task", "list"])
        assert result.exit_code == 0
        assert "Buy flowers" in result.stdout
        assert "draft" in result.stdout

        # draft tasks cannot be toggled
        task_id = _only_task_id(data_dir)
        result = runner.invoke(app, ["--data-dir", data_dir, "task", "done", task_id[:8]])
        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_list_empty(self, data_dir):
        result = runner.invoke(app, ["--data-dir", data_dir, "task", "list"])
        assert result.exit_code == 0
        assert "No tasks." in result.stdout

    def test_list_bad_sort(self, data_dir):
        result = runner.invoke(app, ["--data-dir", data_dir, "task", "list", "--sort-by", "title"])
        assert result.exit_code == 1

    def test_add_with_text_deadline(self, data_dir):
        result = runner.invoke(app, ["--data-dir", data_dir, "task", "add", "Wedding gift", "-d", "2025-03-15"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["--data-dir", data_dir, "task", "list"])
        assert "2025-03-15" in result.stdout

    def test_bad_deadline(self, data_dir):
        result = runner.invoke(app, ["--data-dir", data_dir, "task", "add", "x", "-d", "whenever"])
        assert result.exit_code == 1


class TestEventCommands:

    def test_add_and_list(self, data_dir):
        result = runner.invoke(
            app,
            ["--data-dir", data_dir, "event", "add", "wedding", "Minji", "2025-05-10",
             "--name", "Minji", "-r", "friend", "--gift"],
        )
        assert result.exit_code == 0
        assert "Added wedding" in result.stdout

        result = runner.invoke(app, ["--data-dir", data_dir, "event", "list"])
        assert result.exit_code == 0
        assert "100,000" in result.stdout

        result = runner.invoke(app, ["--data-dir", data_dir, "event", "stats"])
        assert "Events: 1" in result.stdout

    def test_unknown_type(self, data_dir):
        result = runner.invoke(app, ["--data-dir", data_dir, "event", "add", "party", "x", "2025-05-10"])
        assert result.exit_code == 1


def _only_task_id(data_dir):
    lines = (Path(data_dir) / "momentum_tasks.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    return json.loads(lines[0])["id"]
