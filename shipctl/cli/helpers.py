"""Shared helpers for the CLI entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from shipctl.core.result import Err, Result
from shipctl.output.errors import error_exit_code, print_error
from shipctl.release.errors import ShipError

if TYPE_CHECKING:
    from shipctl.output.console import ConsoleProtocol

T = TypeVar("T")


def fail(error: ShipError, console: ConsoleProtocol) -> NoReturn:
    """Report ``error`` and exit with its code."""
    print_error(error, console)
    raise typer.Exit(code=error_exit_code(error))


def exit_on_error(result: Result[T, ShipError], console: ConsoleProtocol) -> T:
    """Return the Ok value, or report the error and exit.

    Replaces the pattern repeated at every step of the entry point:
        match result:
            case Err(e):
                print_error(e, console)
                raise typer.Exit(code=error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        fail(result.error, console)
    return result.value
