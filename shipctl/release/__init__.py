"""Release orchestration: request resolution, config loading and actions."""

from shipctl.release.dispatcher import dispatch
from shipctl.release.environment import load_environment_config
from shipctl.release.model import Command, EnvironmentConfig, ReleaseRequest, docker_tag
from shipctl.release.resolver import resolve_request
from shipctl.release.semver import SemVer, parse_version

__all__ = [
    "Command",
    "EnvironmentConfig",
    "ReleaseRequest",
    "SemVer",
    "dispatch",
    "docker_tag",
    "load_environment_config",
    "parse_version",
    "resolve_request",
]
