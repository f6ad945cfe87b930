"""Tests for shipctl.platform.runner module."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipctl.core.result import Err, Ok
from shipctl.output.console import MockConsole
from shipctl.platform import runner as runner_mod
from shipctl.platform.process import ProcessError
from shipctl.platform.runner import CommandRunner


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, list[str]]]:
    recorded: list[tuple[str, list[str]]] = []

    def fake_run(cmd: list[str], cwd: Path):
        del cwd
        recorded.append(("run", cmd))
        return Ok("out\n")

    def fake_run_silent(cmd: list[str], cwd: Path):
        del cwd
        recorded.append(("silent", cmd))
        return Err(ProcessError(tuple(cmd), 9, "", ""))

    monkeypatch.setattr(runner_mod, "run_process", fake_run)
    monkeypatch.setattr(runner_mod, "run_silent", fake_run_silent)
    return recorded


def test_query_is_not_echoed(tmp_path: Path, calls: list[tuple[str, list[str]]]) -> None:
    console = MockConsole()
    runner = CommandRunner(cwd=tmp_path, console=console)

    assert runner.query(["git", "branch", "-r"]) == Ok("out\n")
    assert console.outputs == []
    assert calls == [("run", ["git", "branch", "-r"])]


def test_capture_echoes_then_runs(tmp_path: Path, calls: list[tuple[str, list[str]]]) -> None:
    console = MockConsole()
    runner = CommandRunner(cwd=tmp_path, console=console)

    assert runner.capture(["docker", "tag", "app", "acme/app:prod"]) == Ok("out\n")
    assert console.commands == ["docker tag app acme/app:prod"]
    assert calls == [("run", ["docker", "tag", "app", "acme/app:prod"])]


def test_stream_propagates_failure(tmp_path: Path, calls: list[tuple[str, list[str]]]) -> None:
    runner = CommandRunner(cwd=tmp_path, console=MockConsole())

    result = runner.stream(["eb", "deploy", "prod-env"])

    assert isinstance(result, Err)
    assert result.error.returncode == 9
    assert calls == [("silent", ["eb", "deploy", "prod-env"])]


def test_dry_run_skips_mutations_but_not_queries(
    tmp_path: Path, calls: list[tuple[str, list[str]]]
) -> None:
    console = MockConsole()
    runner = CommandRunner(cwd=tmp_path, console=console, dry_run=True)

    assert runner.capture(["git", "tag", "-a", "v1.0.0", "-m", "* first"]) == Ok("")
    assert runner.stream(["docker", "push", "acme/app:latest"]) == Ok(None)
    runner.query(["docker", "images", "-q", "app"])

    assert console.commands == [
        "git tag -a v1.0.0 -m '* first'",
        "docker push acme/app:latest",
    ]
    assert calls == [("run", ["docker", "images", "-q", "app"])]
