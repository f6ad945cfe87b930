"""Per-environment configuration.

Each environment keeps a dotenv file at ``environments/<name>/.env``:

    DOCKER_HUB_REPO_PATH=acme/app
    AWS_ENVIRONMENT_NAME=acme-prod

Keys missing from the file fall back to the process environment, so CI jobs
can inject them without a file. The file is read, never exported: loading a
config does not touch ``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from shipctl.core.config import Settings
from shipctl.core.result import Err, Ok, Result
from shipctl.release.errors import (
    ConfigError,
    ConfigFileInvalid,
    MissingAwsEnvironmentName,
    MissingDockerRepoPath,
)
from shipctl.release.model import EnvironmentConfig

__all__ = [
    "AWS_ENVIRONMENT_NAME_KEY",
    "DOCKER_HUB_REPO_PATH_KEY",
    "ENV_FILE_NAME",
    "environment_file",
    "load_environment_config",
]

ENV_FILE_NAME = ".env"
AWS_ENVIRONMENT_NAME_KEY = "AWS_ENVIRONMENT_NAME"
DOCKER_HUB_REPO_PATH_KEY = "DOCKER_HUB_REPO_PATH"


def environment_file(root: Path, settings: Settings, environment: str) -> Path:
    return settings.deploy.environment_dir(root, environment) / ENV_FILE_NAME


def _read_env_file(path: Path) -> Result[dict[str, str | None], ConfigFileInvalid]:
    if not path.is_file():
        return Ok({})
    try:
        return Ok(dict(dotenv_values(path, encoding="utf-8")))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigFileInvalid(path=path, reason=str(e)))


def _lookup(values: Mapping[str, str | None], environ: Mapping[str, str], key: str) -> str:
    value = values.get(key)
    if value is None or not value.strip():
        value = environ.get(key, "")
    return value.strip()


def load_environment_config(
    root: Path,
    settings: Settings,
    environment: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> Result[EnvironmentConfig, ConfigError]:
    """Load the Docker Hub repo path and AWS environment name for ``environment``.

    Args:
        root: Project root
        settings: Project settings (locates the environments directory)
        environment: Environment name from the command line
        environ: Fallback variables (defaults to os.environ)

    Returns:
        Ok(EnvironmentConfig), or Err when a value is missing or the file is unreadable
    """
    path = environment_file(root, settings, environment)
    read = _read_env_file(path)
    if isinstance(read, Err):
        return read

    fallback = os.environ if environ is None else environ
    aws_name = _lookup(read.value, fallback, AWS_ENVIRONMENT_NAME_KEY)
    if not aws_name:
        return Err(MissingAwsEnvironmentName(environment=environment, source=path))

    repo_path = _lookup(read.value, fallback, DOCKER_HUB_REPO_PATH_KEY)
    if not repo_path:
        return Err(MissingDockerRepoPath(environment=environment, source=path))

    return Ok(EnvironmentConfig(docker_hub_repo_path=repo_path, aws_environment_name=aws_name))
