from __future__ import annotations

from pathlib import Path

import pytest

from shipctl.core.config import Settings
from shipctl.core.result import Err, Ok
from shipctl.docker.client import DockerClient
from shipctl.eb.client import EbClient
from shipctl.git.repository import Repository
from shipctl.output.console import MockConsole
from shipctl.platform.runner import MockRunner
from shipctl.release import dispatcher as dispatcher_mod
from shipctl.release.actions import ActionContext, Toolbox
from shipctl.release.errors import ToolFailed
from shipctl.release.model import Command, EnvironmentConfig, ReleaseRequest


def _ctx(command: Command, tmp_path: Path) -> ActionContext:
    runner = MockRunner()
    return ActionContext(
        request=ReleaseRequest(command=command, environment="prod"),
        environment=EnvironmentConfig(docker_hub_repo_path="acme/app", aws_environment_name="prod-env"),
        settings=Settings(),
        root=tmp_path,
        tools=Toolbox(repo=Repository(runner), docker=DockerClient(runner), eb=EbClient(runner)),
        console=MockConsole(),
    )


@pytest.mark.parametrize(
    ("command", "expected"),
    [
        (Command.RELEASE, "release"),
        (Command.PUBLISH, "publish"),
        (Command.DEPLOY, "deploy"),
    ],
)
def test_dispatch_runs_exactly_one_action(
    command: Command,
    expected: str,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    ran: list[str] = []

    def fake(name: str):
        def action(ctx: ActionContext):
            del ctx
            ran.append(name)
            return Ok(None)

        return action

    monkeypatch.setattr(dispatcher_mod, "run_release", fake("release"))
    monkeypatch.setattr(dispatcher_mod, "run_publish", fake("publish"))
    monkeypatch.setattr(dispatcher_mod, "run_deploy", fake("deploy"))

    assert dispatcher_mod.dispatch(_ctx(command, tmp_path)) == Ok(None)
    assert ran == [expected]


def test_dispatch_returns_action_result(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    failure = Err(ToolFailed(command="eb deploy prod-env", returncode=4))
    monkeypatch.setattr(dispatcher_mod, "run_deploy", lambda ctx: failure)

    assert dispatcher_mod.dispatch(_ctx(Command.DEPLOY, tmp_path)) is failure
