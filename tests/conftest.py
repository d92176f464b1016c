"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

import pytest

from release_cut.vcs.git import Commit, Tag
from tests.helpers import FakeRepository, GitRepoBuilder, linear_history, make_commit

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def feat_commit() -> Commit:
    """A feature commit."""
    return make_commit("feat1234567", "feat: add user authentication")


@pytest.fixture
def fix_commit() -> Commit:
    """A bug fix commit."""
    return make_commit("fix1234567", "fix: handle null response")


@pytest.fixture
def breaking_commit() -> Commit:
    """A breaking change commit."""
    return make_commit("break123456", "refactor!: drop the v1 config format")


@pytest.fixture
def sample_commits(feat_commit: Commit, fix_commit: Commit, breaking_commit: Commit) -> list[Commit]:
    """A mix of conventional and non-conventional commits."""
    return [
        feat_commit,
        fix_commit,
        make_commit("docs1234567", "docs: update README"),
        breaking_commit,
        make_commit("wip12345678", "WIP do not merge"),
        make_commit("chore123456", "chore: bump dependencies"),
    ]


@pytest.fixture
def linear_repo() -> FakeRepository:
    """C1 <- C2 <- C3 <- C4 (head), with v1.0.0 on C1 and a non-release tag on C3."""
    return FakeRepository(
        linear_history("c1", "c2", "c3", "c4"),
        head="c4",
        tags=[Tag("v1.0.0", "c1"), Tag("nightly", "c3")],
    )


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepoBuilder:
    """An empty git repository with deterministic commit dates."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    return GitRepoBuilder(tmp_path)
