from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from shipctl.core.config import SETTINGS_FILE_NAME, Settings, load_settings
from shipctl.core.result import Err
from shipctl.docker.client import DockerClient
from shipctl.eb.client import EbClient
from shipctl.git.repository import Repository
from shipctl.output.console import ConsoleProtocol, RichConsole
from shipctl.output.errors import error_exit_code, print_error
from shipctl.platform.runner import CommandRunner
from shipctl.release.actions import ActionContext, Toolbox
from shipctl.release.errors import SettingsInvalid
from shipctl.release.model import EnvironmentConfig, ReleaseRequest


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    settings: Settings
    console: ConsoleProtocol
    dry_run: bool = False

    def toolbox(self) -> Toolbox:
        runner = CommandRunner(cwd=self.root, console=self.console, dry_run=self.dry_run)
        return Toolbox(repo=Repository(runner), docker=DockerClient(runner), eb=EbClient(runner))

    def action_context(self, request: ReleaseRequest, environment: EnvironmentConfig) -> ActionContext:
        return ActionContext(
            request=request,
            environment=environment,
            settings=self.settings,
            root=self.root,
            tools=self.toolbox(),
            console=self.console,
            dry_run=self.dry_run,
        )


def make_console() -> ConsoleProtocol:
    return RichConsole()


def build_context(root: Path | None, *, dry_run: bool, console: ConsoleProtocol) -> CLIContext:
    try:
        project_root = (root or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid --root: {e}")
        raise typer.Exit(code=1)

    if not project_root.is_dir():
        console.error(f"project root is not a directory: {project_root}")
        raise typer.Exit(code=1)

    settings_result = load_settings(project_root / SETTINGS_FILE_NAME)
    if isinstance(settings_result, Err):
        error = SettingsInvalid(path=settings_result.error.path, reason=settings_result.error.message)
        print_error(error, console)
        raise typer.Exit(code=error_exit_code(error))

    return CLIContext(
        root=project_root,
        settings=settings_result.value,
        console=console,
        dry_run=dry_run,
    )
