"""Project settings loaded from ``shipctl.toml``.

The file is optional. Every key has a default, so a project that follows the
conventional layout (an ``app`` image, a ``master`` trunk, descriptors under
``environments/<name>/``) needs no file at all.

Layout:

    [release]
    base_image = "app"
    trunk_branch = "master"
    remote = "origin"

    [deploy]
    environments_dir = "environments"
    dockerrun_file = "Dockerrun.aws.json"
    extension_file = "settings.config"
    extensions_dir = ".ebextensions"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "DEFAULT_BASE_IMAGE",
    "DEFAULT_REMOTE",
    "DEFAULT_TRUNK_BRANCH",
    "SETTINGS_FILE_NAME",
    "DeploySettings",
    "ReleaseSettings",
    "Settings",
    "SettingsError",
    "load_settings",
]

SETTINGS_FILE_NAME = "shipctl.toml"

DEFAULT_BASE_IMAGE = "app"
DEFAULT_TRUNK_BRANCH = "master"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class SettingsError:
    """Error when settings cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    """Names used by the release and publish actions."""

    base_image: str = DEFAULT_BASE_IMAGE
    trunk_branch: str = DEFAULT_TRUNK_BRANCH
    remote: str = DEFAULT_REMOTE


@dataclass(frozen=True, slots=True)
class DeploySettings:
    """Where per-environment deploy files live and where they get staged."""

    environments_dir: str = "environments"
    dockerrun_file: str = "Dockerrun.aws.json"
    extension_file: str = "settings.config"
    extensions_dir: str = ".ebextensions"

    def environment_dir(self, root: Path, environment: str) -> Path:
        return root / self.environments_dir / environment


@dataclass(frozen=True, slots=True)
class Settings:
    """Main settings container."""

    release: ReleaseSettings = field(default_factory=ReleaseSettings)
    deploy: DeploySettings = field(default_factory=DeploySettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Create Settings from a mapping (parsed TOML)."""
        release: StrDict = get_table(data, "release") or {}
        deploy: StrDict = get_table(data, "deploy") or {}
        defaults = DeploySettings()

        return cls(
            release=ReleaseSettings(
                base_image=get_str(release, "base_image") or DEFAULT_BASE_IMAGE,
                trunk_branch=get_str(release, "trunk_branch") or DEFAULT_TRUNK_BRANCH,
                remote=get_str(release, "remote") or DEFAULT_REMOTE,
            ),
            deploy=DeploySettings(
                environments_dir=get_str(deploy, "environments_dir") or defaults.environments_dir,
                dockerrun_file=get_str(deploy, "dockerrun_file") or defaults.dockerrun_file,
                extension_file=get_str(deploy, "extension_file") or defaults.extension_file,
                extensions_dir=get_str(deploy, "extensions_dir") or defaults.extensions_dir,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, SettingsError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except PermissionError:
        return Err(SettingsError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(SettingsError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(SettingsError(f"Error reading settings: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(SettingsError("Settings root must be a TOML table", path=path))
    return Ok(data)


def load_settings(path: Path) -> Result[Settings, SettingsError]:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to shipctl.toml

    Returns:
        Ok(Settings) on success, Err(SettingsError) on a malformed file
    """
    if not path.is_file():
        return Ok(Settings())

    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    return Ok(Settings.from_dict(result.value))
