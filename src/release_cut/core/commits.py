"""Conventional commit classification.

Loosely follows the conventional commits convention: a message starts
with a kind from a fixed set, an optional ``!`` marking a breaking
change, and a colon::

    feat: add --dry-run flag
    fix!: stop accepting unsigned tokens

Scopes (``feat(api):``) are not part of the vocabulary and make a
message malformed. Classification never fails as a whole; messages
that do not fit are handed back so the caller can report them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, NamedTuple

from release_cut.exceptions import MalformedCommitError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from release_cut.vcs.git import Commit

logger = logging.getLogger(__name__)

BREAKING_MARKER = "!"


class CommitKind(StrEnum):
    """The closed set of commit kinds."""

    CI = "ci"
    DOCS = "docs"
    FEAT = "feat"
    FIX = "fix"
    REFACTOR = "refactor"
    REVERT = "revert"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str) -> CommitKind:
        """Validate a commit tag against the known kinds.

        Raises:
            MalformedCommitError: If ``tag`` is not a known kind
        """
        try:
            return cls(tag)
        except ValueError as e:
            raise MalformedCommitError(f"{tag!r} is not a valid commit kind") from e


@dataclass(frozen=True)
class ParsedCommit:
    """A commit together with its classification.

    Attributes:
        kind: Kind taken from the message prefix
        breaking: Whether the prefix ended in ``!``
        commit: The untouched commit
    """

    kind: CommitKind
    breaking: bool
    commit: Commit


class Classification(NamedTuple):
    """Result of :func:`classify_commits`. Unpacks as ``parsed, malformed``."""

    parsed: list[ParsedCommit]
    malformed: list[str]


def parse_commit(commit: Commit) -> ParsedCommit:
    """Classify a single commit by its message prefix.

    Args:
        commit: Commit to classify

    Returns:
        The parsed commit

    Raises:
        MalformedCommitError: If the message has no ``kind:`` prefix or
            the kind is unknown
    """
    tag, sep, _ = commit.message.partition(":")
    if not sep:
        raise MalformedCommitError("message has no ':' separator")

    breaking = tag.endswith(BREAKING_MARKER)
    if breaking:
        tag = tag[: -len(BREAKING_MARKER)]

    return ParsedCommit(kind=CommitKind.from_tag(tag), breaking=breaking, commit=commit)


def classify_commits(commits: Iterable[Commit]) -> Classification:
    """Split commits into parsed and malformed ones.

    Every input commit lands in exactly one of the two lists, in input
    order. A malformed commit is recorded by its raw message.
    """
    parsed = []
    malformed = []

    for commit in commits:
        try:
            parsed.append(parse_commit(commit))
        except MalformedCommitError as e:
            logger.debug("Malformed commit %s: %s", commit.short_sha, e)
            malformed.append(commit.message)

    return Classification(parsed=parsed, malformed=malformed)


def group_commits_by_kind(
    parsed: Iterable[ParsedCommit],
) -> dict[CommitKind, list[ParsedCommit]]:
    """Group parsed commits by kind, keeping their order within each group."""
    grouped: dict[CommitKind, list[ParsedCommit]] = {}
    for pc in parsed:
        grouped.setdefault(pc.kind, []).append(pc)
    return grouped


def get_breaking_changes(parsed: Iterable[ParsedCommit]) -> list[ParsedCommit]:
    return [pc for pc in parsed if pc.breaking]
