"""Exception hierarchy for release-cut.

Every error raised on purpose by this package derives from
:class:`ReleaseCutError`, so callers can catch a single type at the
edge (the CLI does exactly that).

Non-release tags and malformed commit messages are *not* errors: they
are filtered out or returned as data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from release_cut.vcs.git import Tag


class ReleaseCutError(Exception):
    """Base exception for all release-cut errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(ReleaseCutError):
    """Configuration could not be read."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found where one was required."""


class ConfigValidationError(ConfigError):
    """The [tool.release-cut] section holds invalid values."""


# =============================================================================
# Versions
# =============================================================================


class VersionError(ReleaseCutError):
    """Base class for version handling errors."""


class InvalidVersionError(VersionError):
    """A string is not a valid semantic version."""


# =============================================================================
# Git
# =============================================================================


class GitError(ReleaseCutError):
    """A git command failed.

    Attributes:
        stderr: Captured standard error of the failing command, if any
    """

    def __init__(self, message: str, *, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base


class NotAGitRepositoryError(GitError):
    """The given path is not inside a git work tree."""


class TagNotInHistoryError(ReleaseCutError):
    """The latest release tag points at a commit that head cannot reach.

    Raised when the tag lives on a disjoint branch or history was
    rewritten after tagging. There is no safe baseline to compare
    against, so the release flow has to stop.
    """

    def __init__(self, tag: Tag) -> None:
        super().__init__(
            f"Tag {tag.name!r} points at {tag.target[:7]}, which is not an ancestor of HEAD"
        )
        self.tag = tag


# =============================================================================
# Commits
# =============================================================================


class MalformedCommitError(ReleaseCutError):
    """A commit message does not follow the conventional commit format."""
