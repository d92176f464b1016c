"""Version control access for release-cut."""

from __future__ import annotations

from release_cut.vcs.base import RepositoryReader
from release_cut.vcs.git import Commit, GitRepository, Tag

__all__ = [
    "Commit",
    "GitRepository",
    "RepositoryReader",
    "Tag",
]
