from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from shipctl.release.semver import SemVer

__all__ = [
    "DEV_ENVIRONMENT",
    "LATEST_TAG",
    "Command",
    "EnvironmentConfig",
    "ReleaseRequest",
    "docker_tag",
]

DEV_ENVIRONMENT = "dev"
LATEST_TAG = "latest"


class Command(StrEnum):
    RELEASE = "release"
    PUBLISH = "publish"
    DEPLOY = "deploy"


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """A validated invocation: what to do, where, and optionally at which version."""

    command: Command
    environment: str
    version: SemVer | None = None

    @property
    def docker_tag(self) -> str:
        return docker_tag(self.environment)


@dataclass(frozen=True, slots=True)
class EnvironmentConfig:
    docker_hub_repo_path: str
    aws_environment_name: str


def docker_tag(environment: str) -> str:
    """Floating image tag for an environment: ``dev`` publishes as ``latest``."""
    if environment == DEV_ENVIRONMENT:
        return LATEST_TAG
    return environment
