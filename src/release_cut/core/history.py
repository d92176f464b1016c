"""Commit range resolution.

The commits introduced since a release are those reachable from HEAD
but not from the release tag (``git log <tag>..HEAD``). They come back
children before parents; commits that become available at the same
time are ordered by committer time, newest first, then by hash. That
order depends only on the commit graph, so it is identical between
calls and across clones.
"""

from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING, NamedTuple

from release_cut.exceptions import TagNotInHistoryError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from release_cut.vcs.base import RepositoryReader
    from release_cut.vcs.git import Commit, Tag

logger = logging.getLogger(__name__)


class CommitRange(NamedTuple):
    """Commits since the latest release, newest first.

    Unpacks as ``tag, commits``. ``tag`` is ``None`` when the
    repository has no release yet; ``commits`` is then empty.
    """

    tag: Tag | None
    commits: list[Commit]

    @property
    def is_first_release(self) -> bool:
        return self.tag is None


def walk_commit_range(repo: RepositoryReader, tag: Tag | None) -> CommitRange:
    """Collect the commits between ``tag`` (exclusive) and HEAD.

    Args:
        repo: Repository to read
        tag: Latest release tag, or ``None`` if there is none

    Returns:
        The range; empty with ``tag=None`` when there is no prior release

    Raises:
        TagNotInHistoryError: If HEAD cannot reach the tagged commit
    """
    if tag is None:
        logger.info("No release tag found; nothing to compare against")
        return CommitRange(tag=None, commits=[])

    head = repo.head()
    reachable = {commit.sha: commit for commit in repo.walk_history(head)}

    if tag.target not in reachable:
        raise TagNotInHistoryError(tag)

    released = _ancestors(tag.target, reachable)
    unreleased = {sha: commit for sha, commit in reachable.items() if sha not in released}
    commits = _order_newest_first(unreleased)

    logger.debug("Collected %d commits since %s", len(commits), tag.name)
    return CommitRange(tag=tag, commits=commits)


def _ancestors(start: str, commits: Mapping[str, Commit]) -> set[str]:
    """Return ``start`` and every ancestor of it found in ``commits``."""
    seen = {start}
    stack = [start]
    while stack:
        commit = commits[stack.pop()]
        for parent in commit.parents:
            # Parents missing from the map lie beyond a shallow clone's boundary
            if parent in commits and parent not in seen:
                seen.add(parent)
                stack.append(parent)
    return seen


def _order_newest_first(commits: Mapping[str, Commit]) -> list[Commit]:
    """Topologically sort ``commits`` so that children precede parents."""
    children_left = dict.fromkeys(commits, 0)
    for commit in commits.values():
        for parent in commit.parents:
            if parent in children_left:
                children_left[parent] += 1

    ready = [_sort_key(commits[sha]) for sha, count in children_left.items() if count == 0]
    heapq.heapify(ready)

    ordered = []
    while ready:
        _, sha = heapq.heappop(ready)
        commit = commits[sha]
        ordered.append(commit)
        for parent in commit.parents:
            if parent not in children_left:
                continue
            children_left[parent] -= 1
            if children_left[parent] == 0:
                heapq.heappush(ready, _sort_key(commits[parent]))

    return ordered


def _sort_key(commit: Commit) -> tuple[float, str]:
    return (-commit.committer_time.timestamp(), commit.sha)
