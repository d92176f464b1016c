"""Test doubles and builders shared across the test suite."""

from __future__ import annotations

import os
import subprocess
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from release_cut.exceptions import GitError
from release_cut.vcs.git import Commit, Tag

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


def make_commit(
    sha: str,
    message: str = "chore: change",
    *,
    parents: Iterable[str] = (),
    minute: int = 0,
) -> Commit:
    """Build a commit whose timestamps are ``minute`` minutes after BASE_TIME."""
    when = BASE_TIME + timedelta(minutes=minute)
    return Commit(
        sha=sha,
        message=message,
        author_time=when,
        committer_time=when,
        parents=tuple(parents),
        author_name="Test",
        author_email="test@test.com",
    )


def linear_history(*shas: str) -> list[Commit]:
    """Build a chain ``shas[0] <- shas[1] <- ...``, each a minute after its parent."""
    commits = []
    parent: tuple[str, ...] = ()
    for minute, sha in enumerate(shas):
        commits.append(make_commit(sha, f"feat: {sha}", parents=parent, minute=minute))
        parent = (sha,)
    return commits


class FakeRepository:
    """In-memory repository implementing the RepositoryReader protocol."""

    def __init__(self, commits: Iterable[Commit], head: str, tags: Iterable[Tag] = ()) -> None:
        self.commits = {commit.sha: commit for commit in commits}
        self.tags = list(tags)
        self._head = head

    def list_tags(self) -> list[Tag]:
        return list(self.tags)

    def head(self) -> str:
        return self._head

    def walk_history(self, start: str) -> Iterator[Commit]:
        seen = set()
        stack = [start]
        while stack:
            sha = stack.pop()
            if sha in seen:
                continue
            seen.add(sha)
            commit = self.get_commit(sha)
            yield commit
            stack.extend(commit.parents)

    def get_commit(self, sha: str) -> Commit:
        try:
            return self.commits[sha]
        except KeyError as e:
            raise GitError(f"Commit {sha} not found") from e


class GitRepoBuilder:
    """Create commits and tags in a real repository with fixed dates."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._clock = int(BASE_TIME.timestamp())
        self.env = {
            **os.environ,
            "HOME": str(path),
            "GIT_CONFIG_NOSYSTEM": "1",
            "GIT_AUTHOR_NAME": "Test User",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test User",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        }
        self.git("init", "-q")
        self.git("config", "commit.gpgsign", "false")
        self.git("config", "tag.gpgsign", "false")

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=self.path,
            env=self.env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def commit(self, message: str) -> str:
        """Create an empty commit one minute after the previous one."""
        self._clock += 60
        date = f"{self._clock} +0000"
        self.env["GIT_AUTHOR_DATE"] = date
        self.env["GIT_COMMITTER_DATE"] = date
        self.git("commit", "-q", "--allow-empty", "--allow-empty-message", "-m", message)
        return self.git("rev-parse", "HEAD")

    def tag(self, name: str, *, annotated: bool = False, target: str = "HEAD") -> None:
        if annotated:
            self.git("tag", "-a", name, "-m", f"Release {name}", target)
        else:
            self.git("tag", name, target)

    def branch(self, name: str) -> None:
        """Create ``name`` at HEAD and switch to it."""
        self.git("checkout", "-q", "-b", name)

    def checkout(self, ref: str) -> None:
        self.git("checkout", "-q", ref)

    def merge(self, branch: str, message: str) -> str:
        """Merge ``branch`` into the current branch with a merge commit."""
        self._clock += 60
        date = f"{self._clock} +0000"
        self.env["GIT_AUTHOR_DATE"] = date
        self.env["GIT_COMMITTER_DATE"] = date
        self.git("merge", "-q", "--no-ff", "-m", message, branch)
        return self.git("rev-parse", "HEAD")
