from __future__ import annotations

from pathlib import Path

import typer

from shipctl import __version__
from shipctl.cli.context import build_context, make_console
from shipctl.cli.helpers import exit_on_error, fail
from shipctl.core.errors import ErrorCode
from shipctl.core.result import Err
from shipctl.output.console import Style
from shipctl.release.dispatcher import dispatch
from shipctl.release.environment import load_environment_config
from shipctl.release.errors import MissingCommand
from shipctl.release.resolver import resolve_request

USAGE = "usage: shipctl <release|publish|deploy> <environment> [<version>]"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command()
def ship(
    command: str | None = typer.Argument(None, help="release, publish or deploy."),
    environment: str | None = typer.Argument(None, help="Environment name, e.g. dev or prod."),
    version: str | None = typer.Argument(None, help="Version to release, MAJOR.MINOR.PATCH."),
    root: Path | None = typer.Option(
        None,
        "--root",
        envvar="SHIPCTL_ROOT",
        help="Project root (defaults to the current directory).",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print mutating commands without running them."),
    show_version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Release, publish or deploy an environment.

    [bold]release[/bold] tags the built image and cuts the git tag and release branch,
    [bold]publish[/bold] pushes image tags and the release branch,
    [bold]deploy[/bold] ships the environment to Elastic Beanstalk.
    """
    if show_version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    console = make_console()

    resolved = resolve_request(command, environment, version)
    if isinstance(resolved, Err):
        if isinstance(resolved.error, MissingCommand):
            console.print(USAGE)
            console.print("Run 'shipctl --help' for details.", Style.DIM)
        fail(resolved.error, console)
    request = resolved.value

    if request.version is not None:
        v = request.version
        kind = "hotfix" if v.is_hotfix else "release"
        console.info(f"version {v} ({kind} on {v.release_branch})")

    ctx = build_context(root, dry_run=dry_run, console=console)
    env_config = exit_on_error(
        load_environment_config(ctx.root, ctx.settings, request.environment),
        console,
    )

    console.header(f"{request.command} {request.environment}")
    if dry_run:
        console.warning("dry run: mutating commands are printed, not executed")

    exit_on_error(dispatch(ctx.action_context(request, env_config)), console)


def main() -> None:
    app(prog_name="shipctl")
