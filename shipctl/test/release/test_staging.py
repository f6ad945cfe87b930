from __future__ import annotations

from pathlib import Path

import pytest

from shipctl.core.config import Settings
from shipctl.output.console import MockConsole
from shipctl.release.staging import StagedFile, deploy_files, staged_files


def _env_files(root: Path, name: str = "prod") -> list[StagedFile]:
    env_dir = root / "environments" / name
    env_dir.mkdir(parents=True)
    (env_dir / "Dockerrun.aws.json").write_text('{"AWSEBDockerrunVersion": "1"}', encoding="utf-8")
    (env_dir / "settings.config").write_text("option_settings: []\n", encoding="utf-8")
    return deploy_files(root, Settings(), name)


def test_deploy_files_layout(tmp_path: Path) -> None:
    files = deploy_files(tmp_path, Settings(), "prod")

    assert files == [
        StagedFile(
            source=tmp_path / "environments" / "prod" / "Dockerrun.aws.json",
            destination=tmp_path / "Dockerrun.aws.json",
        ),
        StagedFile(
            source=tmp_path / "environments" / "prod" / "settings.config",
            destination=tmp_path / ".ebextensions" / "settings.config",
        ),
    ]


def test_files_present_inside_and_removed_after(tmp_path: Path) -> None:
    files = _env_files(tmp_path)

    with staged_files(files, MockConsole()) as staged:
        assert (tmp_path / "Dockerrun.aws.json").read_text(encoding="utf-8").startswith("{")
        assert (tmp_path / ".ebextensions" / "settings.config").is_file()
        assert staged == [f.destination for f in files]

    assert not (tmp_path / "Dockerrun.aws.json").exists()
    assert not (tmp_path / ".ebextensions").exists()


def test_cleanup_on_exception(tmp_path: Path) -> None:
    files = _env_files(tmp_path)

    with pytest.raises(RuntimeError):
        with staged_files(files, MockConsole()):
            raise RuntimeError("deploy crashed")

    assert not (tmp_path / "Dockerrun.aws.json").exists()
    assert not (tmp_path / ".ebextensions").exists()


def test_cleanup_when_staging_fails_partway(tmp_path: Path) -> None:
    files = _env_files(tmp_path)
    (files[1].source).unlink()

    with pytest.raises(FileNotFoundError):
        with staged_files(files, MockConsole()):
            pytest.fail("body must not run")

    assert not (tmp_path / "Dockerrun.aws.json").exists()
    assert not (tmp_path / ".ebextensions").exists()


def test_existing_files_are_restored(tmp_path: Path) -> None:
    files = _env_files(tmp_path)
    (tmp_path / "Dockerrun.aws.json").write_text("local", encoding="utf-8")
    (tmp_path / ".ebextensions").mkdir()
    (tmp_path / ".ebextensions" / "01-packages.config").write_text("packages: {}\n", encoding="utf-8")

    with staged_files(files, MockConsole()):
        assert (tmp_path / "Dockerrun.aws.json").read_text(encoding="utf-8") != "local"

    assert (tmp_path / "Dockerrun.aws.json").read_text(encoding="utf-8") == "local"
    assert (tmp_path / ".ebextensions" / "01-packages.config").is_file()
    assert not (tmp_path / ".ebextensions" / "settings.config").exists()


def test_dry_run_copies_nothing(tmp_path: Path) -> None:
    files = _env_files(tmp_path)
    console = MockConsole()

    with staged_files(files, console, dry_run=True):
        assert not (tmp_path / "Dockerrun.aws.json").exists()

    assert len(console.find("stage ")) == 2
