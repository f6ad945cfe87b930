"""Release, publish and deploy actions.

Each action checks its preconditions before mutating anything, then runs a
fixed sequence of git/docker/eb commands. The first failing step ends the
action with ``ToolFailed``; nothing is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shipctl.core.config import Settings
from shipctl.core.result import Err, Ok, Result
from shipctl.docker.client import DockerClient, image_ref
from shipctl.eb.client import READY_STATUS, EbClient
from shipctl.git.repository import GitError, Repository
from shipctl.output.console import ConsoleProtocol
from shipctl.platform.process import ProcessError
from shipctl.release.errors import (
    EnvironmentNotReady,
    ImageNotFound,
    ReleaseBranchNotFound,
    ShipError,
    StagingFailed,
    ToolFailed,
)
from shipctl.release.model import EnvironmentConfig, ReleaseRequest
from shipctl.release.semver import SemVer
from shipctl.release.staging import deploy_files, staged_files

__all__ = [
    "ActionContext",
    "Toolbox",
    "release_notes",
    "run_deploy",
    "run_publish",
    "run_release",
]


@dataclass(frozen=True, slots=True)
class Toolbox:
    repo: Repository
    docker: DockerClient
    eb: EbClient


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Everything an action needs, built once per invocation."""

    request: ReleaseRequest
    environment: EnvironmentConfig
    settings: Settings
    root: Path
    tools: Toolbox
    console: ConsoleProtocol
    dry_run: bool = False


def _failed(error: GitError | ProcessError) -> ToolFailed:
    if isinstance(error, GitError):
        return ToolFailed(command=f"git {error.command}", returncode=error.returncode, detail=error.message)
    return ToolFailed(
        command=" ".join(error.command),
        returncode=error.returncode,
        detail=error.stderr.strip(),
    )


def _require_image(docker: DockerClient, image: str) -> Result[None, ShipError]:
    match docker.image_exists(image):
        case Err(e):
            return Err(_failed(e))
        case Ok(False):
            return Err(ImageNotFound(image=image))
        case Ok(_):
            return Ok(None)


def release_notes(repo: Repository, version: SemVer) -> Result[str, GitError]:
    """Commits since the previous tag, one ``* subject (author)`` line each."""
    latest = repo.latest_tag()
    if isinstance(latest, Err):
        return latest

    log = repo.commit_log(since=latest.value)
    if isinstance(log, Err):
        return log

    if not log.value:
        return Ok(f"Release {version}")
    return Ok("\n".join(f"* {line}" for line in log.value))


def run_release(ctx: ActionContext) -> Result[None, ShipError]:
    """Tag the built image and, for a versioned release, cut the git tag and branch."""
    tools = ctx.tools
    console = ctx.console
    base = ctx.settings.release.base_image
    repo_path = ctx.environment.docker_hub_repo_path
    version = ctx.request.version

    checked = _require_image(tools.docker, base)
    if isinstance(checked, Err):
        return checked

    match tools.repo.fetch_all():
        case Err(e):
            console.warning(f"could not synchronize remote refs: {e.message}")
        case Ok(_):
            pass

    if version is not None and version.is_hotfix:
        remote = ctx.settings.release.remote
        found = tools.repo.has_remote_branch(version.release_branch, remote)
        if isinstance(found, Err):
            return Err(_failed(found.error))
        if not found.value:
            return Err(ReleaseBranchNotFound(branch=version.release_branch, remote=remote))

    tagged = tools.docker.tag(base, image_ref(repo_path, ctx.request.docker_tag))
    if isinstance(tagged, Err):
        return Err(_failed(tagged.error))

    if version is None:
        console.success(f"tagged {image_ref(repo_path, ctx.request.docker_tag)}")
        return Ok(None)

    if version.is_hotfix:
        switched = tools.repo.checkout(version.release_branch)
    else:
        switched = tools.repo.checkout(ctx.settings.release.trunk_branch, force=True)
    if isinstance(switched, Err):
        return Err(_failed(switched.error))

    tagged = tools.docker.tag(base, image_ref(repo_path, str(version)))
    if isinstance(tagged, Err):
        return Err(_failed(tagged.error))

    notes = release_notes(tools.repo, version)
    if isinstance(notes, Err):
        return Err(_failed(notes.error))

    created = tools.repo.create_annotated_tag(version.to_tag(), notes.value)
    if isinstance(created, Err):
        return Err(_failed(created.error))

    if not version.is_hotfix:
        branched = tools.repo.create_branch(version.release_branch)
        if isinstance(branched, Err):
            return Err(_failed(branched.error))

    console.success(f"released {version.to_tag()} on {version.release_branch}")
    return Ok(None)


def run_publish(ctx: ActionContext) -> Result[None, ShipError]:
    """Push the image tags and, for a versioned publish, the release branch."""
    tools = ctx.tools
    repo_path = ctx.environment.docker_hub_repo_path
    version = ctx.request.version

    checked = _require_image(tools.docker, repo_path)
    if isinstance(checked, Err):
        return checked

    refs = [image_ref(repo_path, ctx.request.docker_tag)]
    if version is not None:
        refs.append(image_ref(repo_path, str(version)))

    for ref in refs:
        pushed = tools.docker.push(ref)
        if isinstance(pushed, Err):
            return Err(_failed(pushed.error))

    if version is not None:
        pushed_branch = tools.repo.push_with_tags(ctx.settings.release.remote, version.release_branch)
        if isinstance(pushed_branch, Err):
            return Err(_failed(pushed_branch.error))

    ctx.console.success(f"published {', '.join(refs)}")
    return Ok(None)


def run_deploy(ctx: ActionContext) -> Result[None, ShipError]:
    """Deploy the environment's descriptor to its Elastic Beanstalk environment."""
    tools = ctx.tools
    aws_env = ctx.environment.aws_environment_name

    match tools.eb.status(aws_env):
        case Err(_):
            return Err(EnvironmentNotReady(environment=aws_env, status=None))
        case Ok(status) if status != READY_STATUS:
            return Err(EnvironmentNotReady(environment=aws_env, status=status))
        case Ok(_):
            pass

    files = deploy_files(ctx.root, ctx.settings, ctx.request.environment)
    for f in files:
        if not f.source.is_file():
            return Err(StagingFailed(path=f.source, reason="file not found"))

    selected = tools.eb.use(aws_env)
    if isinstance(selected, Err):
        return Err(_failed(selected.error))

    try:
        with staged_files(files, ctx.console, dry_run=ctx.dry_run):
            deployed = tools.eb.deploy(aws_env)
    except OSError as e:
        path = Path(e.filename) if e.filename else ctx.root
        return Err(StagingFailed(path=path, reason=e.strerror or str(e)))

    if isinstance(deployed, Err):
        return Err(_failed(deployed.error))

    ctx.console.success(f"deployed {ctx.request.environment} to {aws_env}")
    return Ok(None)
