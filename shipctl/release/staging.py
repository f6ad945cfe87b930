"""Stage per-environment deploy descriptors into the working directory.

`eb deploy` reads ``Dockerrun.aws.json`` and ``.ebextensions/*`` from the
project root, so the environment's copies are placed there for the duration
of the deploy and removed afterwards, whatever the deploy's outcome. A file
that already sat at a destination is set aside and put back on exit.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from shipctl.core.config import Settings
from shipctl.output.console import ConsoleProtocol, Style

__all__ = ["StagedFile", "deploy_files", "staged_files"]

_BACKUP_SUFFIX = ".shipctl-orig"


@dataclass(frozen=True, slots=True)
class StagedFile:
    source: Path
    destination: Path


def deploy_files(root: Path, settings: Settings, environment: str) -> list[StagedFile]:
    """The descriptor and extension file an environment deploys with."""
    deploy = settings.deploy
    env_dir = deploy.environment_dir(root, environment)
    return [
        StagedFile(
            source=env_dir / deploy.dockerrun_file,
            destination=root / deploy.dockerrun_file,
        ),
        StagedFile(
            source=env_dir / deploy.extension_file,
            destination=root / deploy.extensions_dir / deploy.extension_file,
        ),
    ]


@contextmanager
def staged_files(
    files: list[StagedFile],
    console: ConsoleProtocol,
    *,
    dry_run: bool = False,
) -> Iterator[list[Path]]:
    """Copy ``files`` into place, yield their destinations, then remove them.

    Cleanup runs on normal exit and on any exception, including a failure
    partway through staging.
    """
    copied: list[Path] = []
    backups: list[tuple[Path, Path]] = []
    created_dirs: list[Path] = []

    try:
        for f in files:
            console.print(f"stage {f.source} -> {f.destination}", Style.DIM)
            if dry_run:
                continue

            parent = f.destination.parent
            if not parent.exists():
                parent.mkdir(parents=True)
                created_dirs.append(parent)

            if f.destination.exists():
                backup = f.destination.with_name(f.destination.name + _BACKUP_SUFFIX)
                f.destination.replace(backup)
                backups.append((backup, f.destination))

            shutil.copy2(f.source, f.destination)
            copied.append(f.destination)

        yield [f.destination for f in files]
    finally:
        for path in copied:
            path.unlink(missing_ok=True)
            console.print(f"removed {path}", Style.DIM)
        for backup, original in backups:
            backup.replace(original)
        for directory in reversed(created_dirs):
            if directory.is_dir() and not any(directory.iterdir()):
                directory.rmdir()
