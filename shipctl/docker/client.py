"""Docker CLI adapter: image lookup, tagging and pushing."""

from __future__ import annotations

from shipctl.core.result import Err, Ok, Result
from shipctl.platform.process import ProcessError
from shipctl.platform.runner import Runner

__all__ = ["DockerClient", "image_ref"]


def image_ref(repository: str, tag: str) -> str:
    return f"{repository}:{tag}"


class DockerClient:
    def __init__(self, runner: Runner) -> None:
        self._runner = runner

    def image_exists(self, name: str) -> Result[bool, ProcessError]:
        """True if at least one local image matches ``name`` (repository or repo:tag)."""
        result = self._runner.query(["docker", "images", "-q", name])
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                return Ok(bool(stdout.strip()))

    def tag(self, source: str, target: str) -> Result[None, ProcessError]:
        return self._runner.capture(["docker", "tag", source, target]).map(lambda _: None)

    def push(self, ref: str) -> Result[None, ProcessError]:
        return self._runner.stream(["docker", "push", ref])
