"""Language version value object.

Versions are tracked per minor release and compared as an exact
``(major, minor)`` pair, so ``8.10`` sorts after ``8.9``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from codegraph_stubs.errors import InvalidVersionError

_VERSION_PATTERN = re.compile(r"^\s*(\d+)(?:\.(\d+))?(?:\.\d+)*\s*$")


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor`` language version."""

    major: int
    minor: int = 0

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0:
            raise InvalidVersionError(
                "Version components must be non-negative",
                major=self.major,
                minor=self.minor,
            )

    @classmethod
    def try_parse(cls, text: str) -> Version | None:
        """Parse ``"7.4"``, ``"8"`` or ``"7.4.1"``; ``None`` if not a version.

        Patch components are accepted and ignored.
        """
        match = _VERSION_PATTERN.match(text)
        if match is None:
            return None
        major, minor = match.groups()
        return cls(int(major), int(minor or 0))

    @classmethod
    def parse(cls, text: str | Version) -> Version:
        """Like :meth:`try_parse` but raises on unparsable text."""
        if isinstance(text, Version):
            return text
        version = cls.try_parse(text)
        if version is None:
            raise InvalidVersionError(f"Not a version: {text!r}", text=text)
        return version

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"
