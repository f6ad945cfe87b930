"""Command runner shared by the git, docker and eb adapters.

Read-only queries run silently. Commands that change state are echoed to the
console first and, in dry-run mode, echoed only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from shipctl.core.result import Err, Ok, Result
from shipctl.output.console import ConsoleProtocol
from shipctl.platform.process import ProcessError
from shipctl.platform.process import run as run_process
from shipctl.platform.process import run_silent

__all__ = ["CommandRunner", "MockRunner", "Runner"]


class Runner(Protocol):
    """What the tool adapters need from a runner."""

    def query(self, cmd: list[str]) -> Result[str, ProcessError]: ...

    def capture(self, cmd: list[str]) -> Result[str, ProcessError]: ...

    def stream(self, cmd: list[str]) -> Result[None, ProcessError]: ...


@dataclass(frozen=True, slots=True)
class CommandRunner:
    """Runs external commands from the project root.

    Attributes:
        cwd: Working directory for every command
        console: Where mutating commands are echoed
        dry_run: When True, mutating commands are echoed but not executed
    """

    cwd: Path
    console: ConsoleProtocol
    dry_run: bool = False

    def query(self, cmd: list[str]) -> Result[str, ProcessError]:
        """Run a read-only command and capture its stdout."""
        return run_process(cmd, cwd=self.cwd)

    def capture(self, cmd: list[str]) -> Result[str, ProcessError]:
        """Run a mutating command and capture its stdout."""
        self.console.command(cmd)
        if self.dry_run:
            return Ok("")
        return run_process(cmd, cwd=self.cwd)

    def stream(self, cmd: list[str]) -> Result[None, ProcessError]:
        """Run a mutating command with output going straight to the terminal."""
        self.console.command(cmd)
        if self.dry_run:
            return Ok(None)
        return run_silent(cmd, cwd=self.cwd)


def _no_responses() -> dict[str, Result[str, ProcessError]]:
    return {}


def _no_calls() -> list[tuple[str, list[str]]]:
    return []


@dataclass
class MockRunner:
    """Runner that records commands instead of executing them, for testing.

    Responses are keyed by command prefix (``"git branch -r"``); the longest
    matching prefix wins. Unmatched commands succeed with empty output.
    """

    responses: dict[str, Result[str, ProcessError]] = field(default_factory=_no_responses)
    calls: list[tuple[str, list[str]]] = field(default_factory=_no_calls)

    def respond(self, prefix: str, result: Result[str, ProcessError]) -> None:
        self.responses[prefix] = result

    def fail(self, prefix: str, returncode: int = 1, stderr: str = "") -> None:
        """Make commands starting with ``prefix`` exit with ``returncode``."""
        self.responses[prefix] = Err(ProcessError(tuple(prefix.split()), returncode, "", stderr))

    def _lookup(self, cmd: list[str]) -> Result[str, ProcessError]:
        line = " ".join(cmd)
        matches = [p for p in self.responses if line == p or line.startswith(p + " ")]
        if not matches:
            return Ok("")
        return self.responses[max(matches, key=len)]

    def query(self, cmd: list[str]) -> Result[str, ProcessError]:
        self.calls.append(("query", cmd))
        return self._lookup(cmd)

    def capture(self, cmd: list[str]) -> Result[str, ProcessError]:
        self.calls.append(("capture", cmd))
        return self._lookup(cmd)

    def stream(self, cmd: list[str]) -> Result[None, ProcessError]:
        self.calls.append(("stream", cmd))
        return self._lookup(cmd).map(lambda _: None)

    # Test helper methods

    @property
    def commands(self) -> list[str]:
        return [" ".join(cmd) for _, cmd in self.calls]

    @property
    def mutations(self) -> list[str]:
        """Commands that would change state (everything but queries)."""
        return [" ".join(cmd) for kind, cmd in self.calls if kind != "query"]
