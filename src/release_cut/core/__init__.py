"""Core business logic for release-cut.

This module contains the fundamental building blocks:
- Semantic version parsing and comparison
- Release tag filtering and selection
- Commit range resolution since the latest release
- Conventional commit classification
- Next version proposal
"""

from __future__ import annotations

from release_cut.core.commits import (
    Classification,
    CommitKind,
    ParsedCommit,
    classify_commits,
    get_breaking_changes,
    group_commits_by_kind,
    parse_commit,
)
from release_cut.core.history import CommitRange, walk_commit_range
from release_cut.core.increment import (
    INCREMENT_STRATEGIES,
    IncrementStrategy,
    increment_major,
    increment_minor,
    increment_patch,
    propose_next_version,
)
from release_cut.core.release import ReleaseResolver
from release_cut.core.tags import filter_release_tags, select_latest_tag
from release_cut.core.version import BumpType, Version, parse_version

__all__ = [
    # Version
    "BumpType",
    # Commits
    "Classification",
    "CommitKind",
    # History
    "CommitRange",
    # Increment
    "INCREMENT_STRATEGIES",
    "IncrementStrategy",
    "ParsedCommit",
    # Facade
    "ReleaseResolver",
    "Version",
    "classify_commits",
    # Tags
    "filter_release_tags",
    "get_breaking_changes",
    "group_commits_by_kind",
    "increment_major",
    "increment_minor",
    "increment_patch",
    "parse_commit",
    "parse_version",
    "propose_next_version",
    "select_latest_tag",
    "walk_commit_range",
]
