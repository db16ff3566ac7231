"""Tests for the CLI implementation."""

import json

import pytest
from typer.testing import CliRunner

from judgeio.cli import app


class TestCLI:
    """Test the CLI functionality."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def good_input(self, tmp_path):
        """A valid oii2023_bastioni input file."""
        path = tmp_path / "good.txt"
        path.write_bytes(b"4\n=#<>\n")
        return path

    @pytest.fixture
    def bad_input(self, tmp_path):
        """An oii2023_bastioni input with a trailing space."""
        path = tmp_path / "bad.txt"
        path.write_bytes(b"4 \n=#<>\n")
        return path

    def test_single_file_json_pretty(self, runner, good_input):
        """Test single file output with pretty JSON."""
        result = runner.invoke(app, ["validate", "oii2023_bastioni", str(good_input)])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["success"] is True
        assert payload["problem"] == "oii2023_bastioni"
        assert payload["bytes_consumed"] == 7
        assert "error" not in payload

    def test_multiple_files_jsonl(self, runner, good_input):
        """Test multiple files with JSONL output."""
        result = runner.invoke(app, ["validate", "oii2023_bastioni", str(good_input), str(good_input)])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 2
        for line in lines:
            assert json.loads(line)["success"] is True

    def test_failure_exit_code(self, runner, good_input, bad_input, tmp_path):
        """Test that one failing source makes the run fail."""
        out = tmp_path / "report.jsonl"
        result = runner.invoke(
            app,
            ["validate", "oii2023_bastioni", "--jsonl", "-o", str(out), str(good_input), str(bad_input)],
        )

        assert result.exit_code == 1
        records = [json.loads(line) for line in out.read_text().splitlines()]
        assert [r["success"] for r in records] == [True, False]
        assert records[1]["kind"] == "UNEXPECTED_TOKEN"
        assert records[1]["error"].startswith("UNEXPECTED READ")
        assert records[1]["source"] == str(bad_input)

    def test_stdin_source(self, runner):
        """Test validating data piped on stdin."""
        result = runner.invoke(app, ["validate", "oii2023_bastioni", "-"], input="2\n<>\n")

        assert result.exit_code == 0
        assert json.loads(result.stdout)["success"] is True

    def test_unknown_problem(self, runner, good_input):
        """Test an unregistered problem name."""
        result = runner.invoke(app, ["validate", "nope", str(good_input)])
        assert result.exit_code == 2

    def test_no_input_files(self, runner):
        """Test that missing sources are reported."""
        result = runner.invoke(app, ["validate", "oii2023_bastioni"])
        assert result.exit_code == 1

    def test_problems_listing(self, runner):
        """Test listing registered validators."""
        result = runner.invoke(app, ["problems"])

        assert result.exit_code == 0
        names = [line.split("\t")[0] for line in result.stdout.splitlines()]
        assert {"oii2022_bus", "oii2023_bastioni", "ois2020_islands"} <= set(names)


class TestCLIURL:
    """Test the CLI functionality with remote URLs."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    def test_remote_file(self, runner, httpserver):
        """Test validating a file served over HTTP."""
        httpserver.expect_request("/islands.txt").respond_with_data(b"1 2\n0 1\n")
        result = runner.invoke(app, ["validate", "ois2020_islands", httpserver.url_for("/islands.txt")])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["success"] is True
