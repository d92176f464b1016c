"""Semantic version parsing and comparison.

Release tags are named after semantic versions (``major.minor.patch``
with optional pre-release and build metadata), optionally behind a
prefix such as ``v``. Parsing and precedence rules are delegated to
the ``semver`` package; :class:`Version` is the value type the rest
of release-cut works with.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import total_ordering

import semver

from release_cut.exceptions import InvalidVersionError

DEFAULT_TAG_PREFIX = "v"


class BumpType(StrEnum):
    """Which version component to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """An immutable semantic version.

    Comparison follows semver precedence: numeric major, minor and
    patch, then pre-release identifiers. Build metadata is ignored when
    comparing, so ``1.0.0+a == 1.0.0+b``.

    Example:
        >>> Version.parse("v1.10.0") > Version.parse("1.9.9")
        True
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    @classmethod
    def parse(cls, text: str, prefix: str = DEFAULT_TAG_PREFIX) -> Version:
        """Parse a version string, tolerating an optional prefix.

        Args:
            text: Version or tag name, e.g. ``"1.2.3"`` or ``"v1.2.3-rc.1"``
            prefix: Prefix stripped before parsing when present

        Returns:
            Parsed version

        Raises:
            InvalidVersionError: If the string is not a strict semantic version
        """
        raw = text.removeprefix(prefix) if prefix else text
        try:
            parsed = semver.Version.parse(raw)
        except (ValueError, TypeError) as e:
            raise InvalidVersionError(f"Invalid semantic version: {text!r}") from e

        return cls(
            major=parsed.major,
            minor=parsed.minor,
            patch=parsed.patch,
            prerelease=parsed.prerelease,
            build=parsed.build,
        )

    def to_semver(self) -> semver.Version:
        return semver.Version(
            self.major,
            self.minor,
            self.patch,
            prerelease=self.prerelease,
            build=self.build,
        )

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 as ``self`` sorts before, equal to or after ``other``."""
        return self.to_semver().compare(other.to_semver())

    def bump(self, bump_type: BumpType) -> Version:
        """Return the next release version, dropping pre-release and build data.

        Example:
            >>> str(Version(1, 4, 2, "rc.1").bump(BumpType.MINOR))
            '1.5.0'
        """
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        return Version(self.major, self.minor, self.patch + 1)

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __str__(self) -> str:
        return str(self.to_semver())


def parse_version(text: str, prefix: str = DEFAULT_TAG_PREFIX) -> Version:
    """Parse a version string. See :meth:`Version.parse`."""
    return Version.parse(text, prefix)


def try_parse_version(text: str, prefix: str = DEFAULT_TAG_PREFIX) -> Version | None:
    """Parse a version string, returning ``None`` instead of raising."""
    try:
        return Version.parse(text, prefix)
    except InvalidVersionError:
        return None
