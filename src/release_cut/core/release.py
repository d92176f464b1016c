"""Release range resolution facade.

:class:`ReleaseResolver` ties the pieces together for callers that
assemble changelogs or prompt for the next version::

    resolver = ReleaseResolver(GitRepository(Path(".")))
    tag, commits = resolver.resolve_commit_range()
    parsed, malformed = resolver.classify(commits)
    if tag is not None:
        default = resolver.propose_next_version(tag)

It keeps no state between calls; every call reads the repository
afresh.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from release_cut.config.models import ReleaseCutConfig
from release_cut.core.commits import Classification, classify_commits
from release_cut.core.history import CommitRange, walk_commit_range
from release_cut.core.increment import IncrementStrategy, get_increment_strategy
from release_cut.core.increment import propose_next_version as _propose_next_version
from release_cut.core.tags import filter_release_tags, select_latest_tag

if TYPE_CHECKING:
    from collections.abc import Iterable

    from release_cut.vcs.base import RepositoryReader
    from release_cut.vcs.git import Commit, Tag


class ReleaseResolver:
    """Resolve the latest release, the commits since, and their kinds.

    Args:
        repo: Repository to read
        config: Configuration (defaults if omitted)
        strategy: Increment rule overriding ``config.version.increment``
    """

    def __init__(
        self,
        repo: RepositoryReader,
        config: ReleaseCutConfig | None = None,
        *,
        strategy: IncrementStrategy | None = None,
    ) -> None:
        self.repo = repo
        self.config = config or ReleaseCutConfig()
        self.strategy = strategy or get_increment_strategy(self.config.version.increment)

    def resolve_latest_tag(self) -> Tag | None:
        """Return the release tag with the highest version, or ``None``."""
        prefix = self.config.tag_prefix
        releases = filter_release_tags(self.repo.list_tags(), prefix)
        return select_latest_tag(releases, prefix)

    def resolve_commit_range(self) -> CommitRange:
        """Return the latest release tag and the commits made since.

        Raises:
            TagNotInHistoryError: If HEAD does not descend from the latest tag
        """
        return walk_commit_range(self.repo, self.resolve_latest_tag())

    def classify(self, commits: Iterable[Commit]) -> Classification:
        return classify_commits(commits)

    def propose_next_version(self, tag: Tag) -> str:
        """Propose a default version for the release following ``tag``."""
        return _propose_next_version(tag, prefix=self.config.tag_prefix, strategy=self.strategy)
