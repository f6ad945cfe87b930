"""Turn raw positional arguments into a validated ReleaseRequest."""

from __future__ import annotations

from shipctl.core.result import Err, Ok, Result
from shipctl.release.errors import (
    ArgumentError,
    InvalidCommand,
    InvalidVersion,
    MissingCommand,
    MissingEnvironment,
)
from shipctl.release.model import Command, ReleaseRequest
from shipctl.release.semver import SemVer, parse_version

__all__ = ["resolve_request"]


def resolve_request(
    command: str | None,
    environment: str | None,
    version: str | None = None,
) -> Result[ReleaseRequest, ArgumentError]:
    """Validate the command line, checking command, environment, then version."""
    if not command:
        return Err(MissingCommand())

    try:
        cmd = Command(command)
    except ValueError:
        return Err(InvalidCommand(command=command))

    env = (environment or "").strip()
    if not env:
        return Err(MissingEnvironment())

    parsed: SemVer | None = None
    if version is not None:
        parsed = parse_version(version)
        if parsed is None:
            return Err(InvalidVersion(version=version))

    return Ok(ReleaseRequest(command=cmd, environment=env, version=parsed))
