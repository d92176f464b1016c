"""Git repository access via the git executable.

The repository is only ever read. Each method runs one git command
with :func:`subprocess.run` and parses its output into immutable
:class:`Tag` and :class:`Commit` values.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from release_cut.exceptions import GitError, NotAGitRepositoryError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

# Records come from `git log -z`, so they end in NUL, which git never
# allows inside a commit message. The message is the last field and may
# itself contain the field separator.
_FIELD_SEP = "\x1f"
_RECORD_SEP = "\0"
_LOG_FIELD_COUNT = 7

_LOG_FORMAT = _FIELD_SEP.join(["%H", "%P", "%an", "%ae", "%at", "%ct", "%B"])
_TAG_FORMAT = "%(refname:strip=2)%1f%(objectname)%1f%(*objectname)"

SHORT_SHA_LENGTH = 7


@dataclass(frozen=True)
class Tag:
    """A named pointer to a commit.

    Attributes:
        name: Tag name without the ``refs/tags/`` prefix
        target: Hash of the tagged commit (peeled for annotated tags)
    """

    name: str
    target: str


@dataclass(frozen=True)
class Commit:
    """A single commit, as read from the repository."""

    sha: str
    message: str
    author_time: datetime
    committer_time: datetime
    parents: tuple[str, ...] = ()
    author_name: str = ""
    author_email: str = ""

    @property
    def short_sha(self) -> str:
        """Abbreviated hash, as shown in changelog drafts."""
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def summary(self) -> str:
        """First line of the message."""
        return self.message.split("\n", 1)[0]

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


@dataclass
class GitRepository:
    """Read-only view of a git repository on disk.

    Args:
        path: Any directory inside the work tree

    Raises:
        NotAGitRepositoryError: If ``path`` is not inside a git work tree
        GitError: If the git executable cannot be run
    """

    path: Path
    root: Path = field(init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        try:
            toplevel = self._run("rev-parse", "--show-toplevel")
        except GitError as e:
            raise NotAGitRepositoryError(
                f"{self.path} is not inside a git repository", stderr=e.stderr
            ) from e
        self.root = Path(toplevel.strip())

    def list_tags(self) -> list[Tag]:
        """Return all tags, resolving annotated tags to their commit."""
        output = self._run("for-each-ref", f"--format={_TAG_FORMAT}", "refs/tags")

        tags = []
        for line in output.splitlines():
            if not line:
                continue
            name, objectname, peeled = line.split(_FIELD_SEP)
            tags.append(Tag(name=name, target=peeled or objectname))

        logger.debug("Found %d tags in %s", len(tags), self.root)
        return tags

    def head(self) -> str:
        """Return the commit hash HEAD resolves to.

        Raises:
            GitError: If HEAD does not point at a commit (e.g. an empty repository)
        """
        return self._run("rev-parse", "--verify", "HEAD^{commit}").strip()

    def walk_history(self, start: str) -> Iterator[Commit]:
        """Yield ``start`` and all of its ancestors."""
        output = self._run("log", "-z", f"--format={_LOG_FORMAT}", start, "--")
        yield from _parse_log(output)

    def get_commit(self, sha: str) -> Commit:
        """Look up a single commit by hash or any other revision name."""
        output = self._run("log", "-1", "-z", f"--format={_LOG_FORMAT}", sha, "--")
        commits = list(_parse_log(output))
        if not commits:
            raise GitError(f"Commit {sha} not found")
        return commits[0]

    def _run(self, *args: str) -> str:
        """Run a git command in the repository and return its stdout."""
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except OSError as e:
            raise GitError(f"Could not run git in {self.path}: {e}") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout


def _parse_log(output: str) -> Iterator[Commit]:
    for record in output.split(_RECORD_SEP):
        if not record:
            continue

        fields = record.split(_FIELD_SEP, _LOG_FIELD_COUNT - 1)
        if len(fields) != _LOG_FIELD_COUNT:
            raise GitError(f"Unexpected git log record: {record[:80]!r}")
        sha, parents, author_name, author_email, author_ts, committer_ts, message = fields

        try:
            author_time = datetime.fromtimestamp(int(author_ts), tz=UTC)
            committer_time = datetime.fromtimestamp(int(committer_ts), tz=UTC)
        except ValueError as e:
            raise GitError(f"Unexpected timestamp in git log record for {sha}") from e

        yield Commit(
            sha=sha,
            message=message,
            author_time=author_time,
            committer_time=committer_time,
            parents=tuple(parents.split()),
            author_name=author_name,
            author_email=author_email,
        )
