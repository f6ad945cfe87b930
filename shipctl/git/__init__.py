"""Git operations module.

Usage:
    from shipctl.git import Repository

    repo = Repository(runner)
    branches = repo.remote_branches()
"""

from shipctl.git.repository import GitError, Repository, parse_remote_branches

__all__ = ["GitError", "Repository", "parse_remote_branches"]
