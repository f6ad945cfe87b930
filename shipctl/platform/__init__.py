"""Process execution helpers."""

from shipctl.platform.process import ProcessError, run, run_silent
from shipctl.platform.runner import CommandRunner, MockRunner, Runner

__all__ = ["CommandRunner", "MockRunner", "ProcessError", "Runner", "run", "run_silent"]
