from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["SemVer", "parse_version"]

# Anchored at the start only: "1.2.3-rc1" is accepted as 1.2.3.
_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)", re.ASCII)


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    @property
    def major_minor(self) -> str:
        return f"{self.major}.{self.minor}"

    @property
    def is_hotfix(self) -> bool:
        """A non-zero patch ships from an existing release branch."""
        return self.patch > 0

    @property
    def release_branch(self) -> str:
        return f"release-v{self.major_minor}"

    def to_tag(self) -> str:
        return f"v{self}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> SemVer | None:
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))
