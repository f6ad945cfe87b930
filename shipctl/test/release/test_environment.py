from __future__ import annotations

from pathlib import Path

import pytest

from shipctl.core.config import DeploySettings, Settings
from shipctl.core.result import Err, Ok
from shipctl.release.environment import environment_file, load_environment_config
from shipctl.release.errors import MissingAwsEnvironmentName, MissingDockerRepoPath
from shipctl.release.model import EnvironmentConfig


def _write_env(root: Path, name: str, content: str) -> Path:
    env_dir = root / "environments" / name
    env_dir.mkdir(parents=True)
    path = env_dir / ".env"
    path.write_text(content, encoding="utf-8")
    return path


def test_environment_file_location(tmp_path: Path) -> None:
    assert environment_file(tmp_path, Settings(), "prod") == tmp_path / "environments" / "prod" / ".env"


def test_environment_file_honours_settings(tmp_path: Path) -> None:
    settings = Settings(deploy=DeploySettings(environments_dir="deploy/envs"))
    assert environment_file(tmp_path, settings, "qa") == tmp_path / "deploy" / "envs" / "qa" / ".env"


def test_loads_values_from_dotenv(tmp_path: Path) -> None:
    _write_env(
        tmp_path,
        "prod",
        "# production\nDOCKER_HUB_REPO_PATH=acme/app\nAWS_ENVIRONMENT_NAME='prod-env'\n",
    )

    result = load_environment_config(tmp_path, Settings(), "prod", environ={})

    assert result == Ok(EnvironmentConfig(docker_hub_repo_path="acme/app", aws_environment_name="prod-env"))


def test_supports_export_prefix(tmp_path: Path) -> None:
    _write_env(
        tmp_path,
        "qa",
        "export DOCKER_HUB_REPO_PATH=acme/app\nexport AWS_ENVIRONMENT_NAME=qa-env\n",
    )

    result = load_environment_config(tmp_path, Settings(), "qa", environ={})

    assert isinstance(result, Ok)
    assert result.value.aws_environment_name == "qa-env"


def test_missing_file_falls_back_to_environ(tmp_path: Path) -> None:
    environ = {"DOCKER_HUB_REPO_PATH": "acme/app", "AWS_ENVIRONMENT_NAME": "ci-env"}

    result = load_environment_config(tmp_path, Settings(), "ci", environ=environ)

    assert result == Ok(EnvironmentConfig(docker_hub_repo_path="acme/app", aws_environment_name="ci-env"))


def test_file_wins_over_environ(tmp_path: Path) -> None:
    _write_env(tmp_path, "prod", "DOCKER_HUB_REPO_PATH=acme/app\nAWS_ENVIRONMENT_NAME=prod-env\n")
    environ = {"AWS_ENVIRONMENT_NAME": "other-env"}

    result = load_environment_config(tmp_path, Settings(), "prod", environ=environ)

    assert isinstance(result, Ok)
    assert result.value.aws_environment_name == "prod-env"


def test_missing_aws_environment_name(tmp_path: Path) -> None:
    path = _write_env(tmp_path, "prod", "DOCKER_HUB_REPO_PATH=acme/app\n")

    result = load_environment_config(tmp_path, Settings(), "prod", environ={})

    assert result == Err(MissingAwsEnvironmentName(environment="prod", source=path))


def test_empty_value_counts_as_missing(tmp_path: Path) -> None:
    _write_env(tmp_path, "prod", "DOCKER_HUB_REPO_PATH=\nAWS_ENVIRONMENT_NAME=prod-env\n")

    result = load_environment_config(tmp_path, Settings(), "prod", environ={})

    assert isinstance(result, Err)
    assert isinstance(result.error, MissingDockerRepoPath)


def test_aws_name_checked_first(tmp_path: Path) -> None:
    result = load_environment_config(tmp_path, Settings(), "prod", environ={})

    assert isinstance(result, Err)
    assert isinstance(result.error, MissingAwsEnvironmentName)


def test_loading_does_not_export(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCKER_HUB_REPO_PATH", raising=False)
    _write_env(tmp_path, "prod", "DOCKER_HUB_REPO_PATH=acme/app\nAWS_ENVIRONMENT_NAME=prod-env\n")

    load_environment_config(tmp_path, Settings(), "prod")

    import os

    assert "DOCKER_HUB_REPO_PATH" not in os.environ
