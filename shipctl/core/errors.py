"""Exit codes for the shipctl process.

Argument, configuration and precondition failures all exit with
``ErrorCode.ERROR``. A failing push or deploy exits with the tool's own
status instead, so these values are not the only codes the process returns.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes owned by shipctl.

    These values are used as process exit codes and should remain stable.
    """

    OK = 0
    ERROR = 1

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower()

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK
