"""
Tests for the cmdsplit command-line interface.
"""

import importlib.metadata
import json

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from cmdsplit.cli import app
from cmdsplit.config import CONFIG

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    monkeypatch.delenv("CMDSPLIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CMDSPLIT_OUTPUT_FORMAT", raising=False)
    yield
    CONFIG.update(log_level="WARNING", output_format="table")


def test_split_json():
    result = runner.invoke(app, ["split", "--json", "echo a && ls > out"])
    assert result.exit_code == 0
    rows = [json.loads(line) for line in result.stdout.splitlines()]
    assert rows == [
        {
            "command": "echo",
            "params": "a",
            "redirection": "",
            "redirection_target": "",
            "control_operator": "&&",
        },
        {
            "command": "ls",
            "params": "",
            "redirection": ">",
            "redirection_target": "out",
            "control_operator": "",
        },
    ]


def test_split_table():
    result = runner.invoke(app, ["split", "ls -la; pwd"])
    assert result.exit_code == 0
    assert "command" in result.stdout
    assert "ls" in result.stdout
    assert "-la" in result.stdout
    assert "pwd" in result.stdout


def test_output_format_from_environment():
    result = runner.invoke(
        app, ["split", "cat foo | wc"], env={"CMDSPLIT_OUTPUT_FORMAT": "json"}
    )
    assert result.exit_code == 0
    rows = [json.loads(line) for line in result.stdout.splitlines()]
    assert [row["command"] for row in rows] == ["cat", "wc"]
    assert rows[0]["control_operator"] == "|"


def test_file(tmp_path):
    script = tmp_path / "commands.sh"
    script.write_text("make && make install\nrm -rf build\n", encoding="utf-8")

    result = runner.invoke(app, ["file", str(script), "--json"])
    assert result.exit_code == 0
    rows = [json.loads(line) for line in result.stdout.splitlines()]
    assert [row["command"] for row in rows] == ["make", "make", "rm"]
    assert rows[1]["params"] == "install"


def test_missing_file(tmp_path):
    result = runner.invoke(app, ["file", str(tmp_path / "missing.sh")])
    assert result.exit_code == 1
    assert "Error reading" in result.output


def test_invalid_output_format_from_environment():
    result = runner.invoke(app, ["split", "ls"], env={"CMDSPLIT_OUTPUT_FORMAT": "xml"})
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValidationError)
    assert "Invalid configuration" in result.output


def test_invalid_log_level_from_environment():
    result = runner.invoke(app, ["split", "ls"], env={"CMDSPLIT_LOG_LEVEL": "loud"})
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_log_level_option():
    result = runner.invoke(app, ["--log-level", "debug", "split", "--json", "ls"])
    assert result.exit_code == 0
    assert CONFIG.log_level == "DEBUG"
    assert json.loads(result.stdout.splitlines()[-1])["command"] == "ls"

    result = runner.invoke(app, ["--log-level", "loud", "split", "ls"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValidationError)
    assert "Invalid configuration" in result.output


def test_version(monkeypatch):
    monkeypatch.setattr(importlib.metadata, "version", lambda name: "9.9.9")
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "cmdsplit version: 9.9.9" in result.stdout


def test_file_not_utf8(tmp_path):
    script = tmp_path / "binary.sh"
    script.write_bytes(b"echo \xff\xfe && ls\n")

    result = runner.invoke(app, ["file", str(script)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Error reading" in result.output
