"""Git repository abstraction.

Provides the handful of git operations a release needs: syncing remote
refs, listing remote branches, switching branches, and creating annotated
tags with release notes. All operations return Result types.

Usage:
    repo = Repository(CommandRunner(cwd=root, console=console))

    match repo.latest_tag():
        case Ok(tag):
            print(f"last release: {tag or 'none'}")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass

from shipctl.core.result import Err, Ok, Result
from shipctl.platform.process import ProcessError
from shipctl.platform.runner import Runner

__all__ = [
    "GitError",
    "Repository",
    "parse_remote_branches",
]

# %s subject, %an author name
_LOG_FORMAT = "%s (%an)"


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


def _git_error(command: str, e: ProcessError, fallback: str) -> GitError:
    return GitError(
        command=command,
        message=e.stderr.strip() or e.stdout.strip() or fallback,
        returncode=e.returncode,
    )


def parse_remote_branches(output: str) -> list[str]:
    """Parse `git branch -r` output into ``remote/branch`` names.

    Symbolic refs such as ``origin/HEAD -> origin/master`` are skipped.
    """
    branches: list[str] = []
    for line in output.splitlines():
        name = line.strip()
        if not name or "->" in name:
            continue
        branches.append(name)
    return branches


class Repository:
    """Git operations on the project checkout.

    Queries always run; mutating commands go through the runner, which
    echoes them and honours dry-run mode.
    """

    def __init__(self, runner: Runner) -> None:
        self._runner = runner

    def fetch_all(self) -> Result[str, GitError]:
        """Refresh remote refs and tags from every remote."""
        result = self._runner.capture(["git", "fetch", "--all", "--tags"])
        match result:
            case Err(e):
                return Err(_git_error("fetch --all --tags", e, "fetch failed"))
            case Ok(stdout):
                return Ok(stdout.strip())

    def remote_branches(self) -> Result[list[str], GitError]:
        """List remote-tracking branches as ``remote/branch``."""
        result = self._runner.query(["git", "branch", "-r"])
        match result:
            case Err(e):
                return Err(_git_error("branch -r", e, "branch listing failed"))
            case Ok(stdout):
                return Ok(parse_remote_branches(stdout))

    def has_remote_branch(self, branch: str, remote: str) -> Result[bool, GitError]:
        result = self.remote_branches()
        if isinstance(result, Err):
            return result
        return Ok(f"{remote}/{branch}" in result.value)

    def checkout(self, branch: str, *, force: bool = False) -> Result[None, GitError]:
        """Switch to an existing branch, discarding local changes when forced."""
        args = ["git", "checkout"]
        if force:
            args.append("-f")
        args.append(branch)
        result = self._runner.capture(args)
        match result:
            case Err(e):
                return Err(_git_error(" ".join(args[1:]), e, "checkout failed"))
            case Ok(_):
                return Ok(None)

    def create_branch(self, branch: str) -> Result[None, GitError]:
        """Create a branch at HEAD and switch to it."""
        result = self._runner.capture(["git", "checkout", "-b", branch])
        match result:
            case Err(e):
                return Err(_git_error(f"checkout -b {branch}", e, "branch creation failed"))
            case Ok(_):
                return Ok(None)

    def latest_tag(self) -> Result[str | None, GitError]:
        """Most recent tag reachable from HEAD, or None when there is none yet."""
        result = self._runner.query(["git", "describe", "--tags", "--abbrev=0"])
        match result:
            case Err(e):
                # describe exits 128 with "No names found" on an untagged history
                if "no names found" in e.stderr.lower() or "no tags" in e.stderr.lower():
                    return Ok(None)
                return Err(_git_error("describe --tags --abbrev=0", e, "describe failed"))
            case Ok(stdout):
                return Ok(stdout.strip() or None)

    def commit_log(self, since: str | None) -> Result[list[str], GitError]:
        """Commit subjects with author names, newest first.

        Args:
            since: Exclusive lower bound (a tag); None lists all of HEAD's history
        """
        rev = f"{since}..HEAD" if since else "HEAD"
        result = self._runner.query(["git", "log", rev, f"--pretty=format:{_LOG_FORMAT}"])
        match result:
            case Err(e):
                return Err(_git_error(f"log {rev}", e, "log failed"))
            case Ok(stdout):
                return Ok([ln.strip() for ln in stdout.splitlines() if ln.strip()])

    def create_annotated_tag(self, tag: str, message: str) -> Result[None, GitError]:
        result = self._runner.capture(["git", "tag", "-a", tag, "-m", message])
        match result:
            case Err(e):
                return Err(_git_error(f"tag -a {tag}", e, "tag creation failed"))
            case Ok(_):
                return Ok(None)

    def push_with_tags(self, remote: str, branch: str) -> Result[None, GitError]:
        """Push a branch and all tags to the remote."""
        result = self._runner.stream(["git", "push", remote, branch, "--tags"])
        match result:
            case Err(e):
                return Err(_git_error(f"push {remote} {branch} --tags", e, "push failed"))
            case Ok(_):
                return Ok(None)
