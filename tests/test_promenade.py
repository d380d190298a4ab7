"""
tests/test_promenade.py - Promenade CLI Tests

Verifies output formats and exit codes:
  - 0: success
  - 2: fatal error (missing file, bad input)
"""

import json

import pytest
from click.testing import CliRunner

from promenade import main


@pytest.fixture
def cli_runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def example_path(tmp_path):
    path = tmp_path / "example"
    path.write_text("s1,x3/4,pe/b\n", encoding="utf-8")
    return path


class TestPlainOutput:
    """Default plain report."""

    def test_defaults_read_example_in_cwd(self, cli_runner, example_path, monkeypatch):
        monkeypatch.chdir(example_path.parent)
        result = cli_runner.invoke(main, [])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Result = baedc"

    def test_explicit_arguments(self, cli_runner, example_path):
        result = cli_runner.invoke(main, ["5", str(example_path), "2"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Result = ceadb"

    def test_cycle_line(self, cli_runner, example_path):
        result = cli_runner.invoke(main, ["5", str(example_path), "1000000000"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["1 [4]", "Result = abcde"]


class TestOtherOutputs:
    """--output json and rich."""

    def test_json(self, cli_runner, example_path):
        result = cli_runner.invoke(main, ["5", str(example_path), "9", "-o", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["final_state"] == "baedc"
        assert data["cycle"] == {"start": 1, "length": 4}

    def test_rich(self, cli_runner, example_path):
        result = cli_runner.invoke(main, ["5", str(example_path), "3", "--output", "rich"])
        assert result.exit_code == 0, result.output
        assert "Result" in result.output
        assert "ecbda" in result.output


class TestReceiptsOption:
    """--receipts appends JSONL."""

    def test_writes_receipts(self, cli_runner, example_path, tmp_path):
        sink = tmp_path / "receipts.jsonl"
        result = cli_runner.invoke(main, ["5", str(example_path), "10", "--receipts", str(sink)])
        assert result.exit_code == 0, result.output
        lines = sink.read_text(encoding="utf-8").splitlines()
        types = [json.loads(line)["receipt_type"] for line in lines]
        assert types == ["cycle_detected", "dance_complete"]

    def test_appends(self, cli_runner, example_path, tmp_path):
        sink = tmp_path / "receipts.jsonl"
        for _ in range(2):
            cli_runner.invoke(main, ["5", str(example_path), "1", "--receipts", str(sink)])
        assert len(sink.read_text(encoding="utf-8").splitlines()) == 2


class TestErrors:
    """Fatal errors exit with code 2."""

    def test_missing_program(self, cli_runner, tmp_path):
        result = cli_runner.invoke(main, ["5", str(tmp_path / "missing")])
        assert result.exit_code == 2
        assert "Program file not found" in result.output

    def test_missing_program_json(self, cli_runner, tmp_path):
        result = cli_runner.invoke(main, ["5", str(tmp_path / "missing"), "-o", "json"])
        assert result.exit_code == 2
        assert json.loads(result.output)["error"] == "program not found"

    def test_parse_error(self, cli_runner, tmp_path):
        path = tmp_path / "bad"
        path.write_text("s1,q2", encoding="utf-8")
        result = cli_runner.invoke(main, ["5", str(path), "-o", "json"])
        assert result.exit_code == 2
        data = json.loads(result.output)
        assert data["error"] == "parse error"
        assert data["token"] == "q2"
        assert data["index"] == 1

    def test_parse_error_plain(self, cli_runner, tmp_path):
        path = tmp_path / "bad"
        path.write_text("s1,q2", encoding="utf-8")
        result = cli_runner.invoke(main, ["5", str(path)])
        assert result.exit_code == 2
        assert "Cannot parse" in result.output

    def test_directory_as_program(self, cli_runner, tmp_path):
        result = cli_runner.invoke(main, ["5", str(tmp_path)])
        assert result.exit_code == 2
        assert "Cannot read program" in result.output

    def test_directory_as_program_json(self, cli_runner, tmp_path):
        result = cli_runner.invoke(main, ["5", str(tmp_path), "-o", "json"])
        assert result.exit_code == 2
        assert json.loads(result.output)["error"] == "cannot read program"

    def test_non_utf8_program(self, cli_runner, tmp_path):
        path = tmp_path / "binary"
        path.write_bytes(b"\xff\xfe")
        result = cli_runner.invoke(main, ["5", str(path), "-o", "json"])
        assert result.exit_code == 2
        data = json.loads(result.output)
        assert data["error"] == "parse error"
        assert "UTF-8" in data["message"]

    def test_precondition_violation(self, cli_runner, example_path):
        result = cli_runner.invoke(main, ["4", str(example_path), "-o", "json"])
        assert result.exit_code == 2
        data = json.loads(result.output)
        assert data["error"] == "precondition violation"
        assert data["move"] == "x3/4"

    def test_invalid_size(self, cli_runner, example_path):
        result = cli_runner.invoke(main, ["27", str(example_path), "-o", "json"])
        assert result.exit_code == 2
        assert json.loads(result.output)["error"] == "invalid configuration"

    def test_non_integer_size(self, cli_runner, example_path):
        """Click rejects a non-numeric SIZE as a usage error."""
        result = cli_runner.invoke(main, ["five", str(example_path)])
        assert result.exit_code == 2
