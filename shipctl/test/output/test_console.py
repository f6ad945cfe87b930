"""Tests for shipctl.output.console module."""

from __future__ import annotations

import pytest

from shipctl.output.console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
    format_command,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.DIM) == "dim"


class TestFormatCommand:
    def test_plain(self) -> None:
        assert format_command(["eb", "deploy", "prod-env"]) == "$ eb deploy prod-env"

    def test_quotes_arguments_with_spaces(self) -> None:
        assert format_command(["git", "tag", "-a", "v1.0.0", "-m", "* Fix (Ada)"]) == (
            "$ git tag -a v1.0.0 -m '* Fix (Ada)'"
        )


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_shorthands(self) -> None:
        console = MockConsole()
        console.success("published")
        console.warning("could not fetch")
        console.error("image not found: app")
        console.info("version 1.2.3")
        console.header("release prod")

        assert console.messages == [
            "OK published",
            "warning: could not fetch",
            "error: image not found: app",
            "info: version 1.2.3",
            "release prod",
        ]
        assert console.has_success()
        assert console.has_warning()
        assert console.has_error()

    def test_commands(self) -> None:
        console = MockConsole()
        console.command(["docker", "push", "acme/app:prod"])
        console.print("not a command")

        assert console.commands == ["docker push acme/app:prod"]
        assert console.outputs[0].style == Style.DIM

    def test_find_and_text(self) -> None:
        console = MockConsole()
        console.print("stage a -> b")
        console.print("removed b")

        assert len(console.find("stage")) == 1
        assert console.text == "stage a -> b\nremoved b"


class TestRichConsole:
    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = RichConsole()
        assert callable(console.command)

    def test_markup_in_messages_is_not_interpreted(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("bad tag [v1]")
        console.command(["git", "log", "[x]"])

        out = capsys.readouterr().out
        assert "bad tag [v1]" in out
        assert "[x]" in out
