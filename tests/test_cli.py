"""Tests for the command line entrypoint."""

from __future__ import annotations

import io
import os
import subprocess
import sys
from pathlib import Path

import pytest
from debug_output import cli

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_writes_joined_message_to_stderr(capsys) -> None:
    cli.main(["hello", "world", "--sink", "stderr"])
    assert capsys.readouterr().err == "hello world\r\n"


def test_category_and_no_newline(capsys) -> None:
    cli.main(["hello", "--category", "CAT", "--no-newline", "--sink", "stderr"])
    assert capsys.readouterr().err == "CAT:hello"


def test_reads_stdin_lines(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO("one\r\ntwo\n"))
    cli.main(["--sink", "stderr"])
    assert capsys.readouterr().err == "one\r\ntwo\r\n"


def test_null_sink_writes_nothing(capsys) -> None:
    cli.main(["quiet", "--sink", "null"])
    assert capsys.readouterr().err == ""


def test_unknown_sink_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["x", "--sink", "carrier-pigeon"])
    assert excinfo.value.code == 2


def test_disabled_environment_writes_nothing(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("DEBUG_OUTPUT_DISABLE", "1")
    cli.main(["hello", "--sink", "stderr"])
    assert capsys.readouterr().err == ""


def test_sink_from_environment(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("DEBUG_OUTPUT_SINK", "null")
    cli.main(["quiet"])
    assert capsys.readouterr().err == ""


@pytest.mark.skipif(sys.platform == "win32", reason="windows sink is available there")
def test_unavailable_sink_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["x", "--sink", "windows-debugger"])
    assert excinfo.value.code == 2


def test_optimized_interpreter_writes_nothing() -> None:
    result = subprocess.run(
        [sys.executable, "-O", "-m", "debug_output.cli", "hello", "--sink", "stderr"],
        cwd=str(PROJECT_ROOT),
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)},
        check=True,
        capture_output=True,
        text=True,
    )
    assert result.stderr == ""
