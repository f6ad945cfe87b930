from __future__ import annotations

from shipctl.core.result import Result
from shipctl.release.actions import ActionContext, run_deploy, run_publish, run_release
from shipctl.release.errors import ShipError
from shipctl.release.model import Command

__all__ = ["dispatch"]


def dispatch(ctx: ActionContext) -> Result[None, ShipError]:
    """Run the single action the request names."""
    match ctx.request.command:
        case Command.RELEASE:
            return run_release(ctx)
        case Command.PUBLISH:
            return run_publish(ctx)
        case Command.DEPLOY:
            return run_deploy(ctx)
        case _:
            raise AssertionError(f"unexpected command: {ctx.request.command}")
