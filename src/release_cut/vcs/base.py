"""Read-only repository interface consumed by the core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from release_cut.vcs.git import Commit, Tag


@runtime_checkable
class RepositoryReader(Protocol):
    """What the range resolver needs from a version control backend.

    :class:`~release_cut.vcs.git.GitRepository` is the production
    implementation; tests use an in-memory one.
    """

    def list_tags(self) -> list[Tag]:
        """Return every tag with the commit it (finally) points at."""
        ...

    def head(self) -> str:
        """Return the hash of the currently checked out commit."""
        ...

    def walk_history(self, start: str) -> Iterator[Commit]:
        """Yield ``start`` and every commit reachable from it, each once."""
        ...

    def get_commit(self, sha: str) -> Commit:
        """Look up a single commit."""
        ...
