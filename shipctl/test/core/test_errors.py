"""Tests for shipctl.core.errors module."""

from shipctl.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert int(ErrorCode.OK) == 0
    assert int(ErrorCode.ERROR) == 1


def test_str() -> None:
    assert str(ErrorCode.ERROR) == "error"


def test_is_success() -> None:
    assert ErrorCode.OK.is_success
    assert not ErrorCode.ERROR.is_success
