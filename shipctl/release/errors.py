"""Error types for release, publish and deploy runs.

Errors fall into four groups. Argument, config and precondition errors are
detected before anything is mutated and exit with 1. ``ToolFailed`` carries
the failing tool's own exit status, which becomes the process exit status.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "ArgumentError",
    "ConfigError",
    "ConfigFileInvalid",
    "EnvironmentNotReady",
    "ImageNotFound",
    "InvalidCommand",
    "InvalidVersion",
    "MissingAwsEnvironmentName",
    "MissingCommand",
    "MissingDockerRepoPath",
    "MissingEnvironment",
    "PreconditionError",
    "ReleaseBranchNotFound",
    "SettingsInvalid",
    "ShipError",
    "StagingFailed",
    "ToolFailed",
]


# Arguments


@dataclass(frozen=True, slots=True)
class MissingCommand:
    pass


@dataclass(frozen=True, slots=True)
class InvalidCommand:
    command: str


@dataclass(frozen=True, slots=True)
class MissingEnvironment:
    pass


@dataclass(frozen=True, slots=True)
class InvalidVersion:
    version: str


# Configuration


@dataclass(frozen=True, slots=True)
class MissingAwsEnvironmentName:
    environment: str
    source: Path


@dataclass(frozen=True, slots=True)
class MissingDockerRepoPath:
    environment: str
    source: Path


@dataclass(frozen=True, slots=True)
class ConfigFileInvalid:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class SettingsInvalid:
    path: Path | None
    reason: str


# Preconditions


@dataclass(frozen=True, slots=True)
class ImageNotFound:
    image: str
    hint: str = "Build the image first"


@dataclass(frozen=True, slots=True)
class ReleaseBranchNotFound:
    branch: str
    remote: str


@dataclass(frozen=True, slots=True)
class EnvironmentNotReady:
    environment: str
    status: str | None


@dataclass(frozen=True, slots=True)
class StagingFailed:
    path: Path
    reason: str


# Propagated


@dataclass(frozen=True, slots=True)
class ToolFailed:
    command: str
    returncode: int
    detail: str = ""


ArgumentError = MissingCommand | InvalidCommand | MissingEnvironment | InvalidVersion

ConfigError = MissingAwsEnvironmentName | MissingDockerRepoPath | ConfigFileInvalid | SettingsInvalid

PreconditionError = ImageNotFound | ReleaseBranchNotFound | EnvironmentNotReady | StagingFailed

ShipError = ArgumentError | ConfigError | PreconditionError | ToolFailed
