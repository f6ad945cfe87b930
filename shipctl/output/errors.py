"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shipctl.core.errors import ErrorCode
from shipctl.output.console import Style
from shipctl.release.errors import (
    ConfigFileInvalid,
    EnvironmentNotReady,
    ImageNotFound,
    InvalidCommand,
    InvalidVersion,
    MissingAwsEnvironmentName,
    MissingCommand,
    MissingDockerRepoPath,
    MissingEnvironment,
    ReleaseBranchNotFound,
    SettingsInvalid,
    ShipError,
    StagingFailed,
    ToolFailed,
)

if TYPE_CHECKING:
    from shipctl.output.console import ConsoleProtocol

__all__ = ["error_exit_code", "print_error"]


def print_error(error: ShipError, console: ConsoleProtocol) -> None:
    """Print an error to console with appropriate formatting."""
    match error:
        case MissingCommand():
            console.error("missing command")
            console.print("hint: expected one of: release, publish, deploy", Style.DIM)
        case InvalidCommand(command=command):
            console.error(f"unknown command: {command}")
            console.print("hint: expected one of: release, publish, deploy", Style.DIM)
        case MissingEnvironment():
            console.error("missing environment name")
        case InvalidVersion(version=version):
            console.error(f"invalid version: {version}")
            console.print("hint: expected MAJOR.MINOR.PATCH, e.g. 1.4.0", Style.DIM)
        case MissingAwsEnvironmentName(environment=env, source=source):
            console.error(f"{env}: AWS_ENVIRONMENT_NAME is not set")
            console.print(f"hint: define it in {source}", Style.DIM)
        case MissingDockerRepoPath(environment=env, source=source):
            console.error(f"{env}: DOCKER_HUB_REPO_PATH is not set")
            console.print(f"hint: define it in {source}", Style.DIM)
        case ConfigFileInvalid(path=path, reason=reason):
            console.error(f"cannot read {path}: {reason}")
        case SettingsInvalid(path=path, reason=reason):
            where = f" ({path})" if path else ""
            console.error(f"invalid settings{where}: {reason}")
        case ImageNotFound(image=image, hint=hint):
            console.error(f"image not found: {image}")
            console.print(f"hint: {hint}", Style.DIM)
        case ReleaseBranchNotFound(branch=branch, remote=remote):
            console.error(f"release branch not found: {remote}/{branch}")
            console.print("hint: hotfixes ship from an existing release branch", Style.DIM)
        case EnvironmentNotReady(environment=env, status=status):
            if status is None:
                console.error(f"environment {env} not found or status unavailable")
            else:
                console.error(f"environment {env} is not ready (status: {status})")
        case StagingFailed(path=path, reason=reason):
            console.error(f"cannot stage {path}: {reason}")
        case ToolFailed(command=command, returncode=rc, detail=detail):
            console.error(f"{command} failed (exit {rc})")
            if detail:
                console.print(detail, Style.DIM)


def error_exit_code(error: ShipError) -> int:
    """Exit code for an error: the tool's own status for ToolFailed, else 1."""
    match error:
        case ToolFailed(returncode=rc) if rc > 0:
            return rc
        case _:
            return int(ErrorCode.ERROR)
