"""Elastic Beanstalk CLI adapter.

``eb status`` prints a block of ``Key: value`` lines; the environment is
deployable only when its ``Status`` line reads ``Ready``.
"""

from __future__ import annotations

import re

from shipctl.core.result import Err, Ok, Result
from shipctl.platform.process import ProcessError
from shipctl.platform.runner import Runner

__all__ = ["READY_STATUS", "EbClient", "parse_status"]

READY_STATUS = "Ready"

_STATUS_RE = re.compile(r"^\s*Status:\s*(\S+)", re.MULTILINE)


def parse_status(output: str) -> str | None:
    """Extract the value of the ``Status:`` line from `eb status` output."""
    m = _STATUS_RE.search(output)
    if m is None:
        return None
    return m.group(1)


class EbClient:
    def __init__(self, runner: Runner) -> None:
        self._runner = runner

    def status(self, environment: str) -> Result[str | None, ProcessError]:
        """Current status of an environment, None if the output has no status line."""
        result = self._runner.query(["eb", "status", environment])
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                return Ok(parse_status(stdout))

    def use(self, environment: str) -> Result[None, ProcessError]:
        """Make ``environment`` the default for subsequent eb commands."""
        return self._runner.capture(["eb", "use", environment]).map(lambda _: None)

    def deploy(self, environment: str) -> Result[None, ProcessError]:
        return self._runner.stream(["eb", "deploy", environment])
