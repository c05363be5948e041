"""Shared pytest fixtures."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from changelog_py.config.models import ChangelogPyConfig
from changelog_py.vcs.git import Commit, GitRepository

BASE_TIMESTAMP = 1_700_000_000


class GitRepoBuilder:
    """Builds a throwaway git repository commit by commit.

    Every commit gets a date one minute after the previous one so tag
    creation order is unambiguous.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._ticks = 0
        self._git("init", "--quiet")

    def _git(self, *args: str) -> str:
        self._ticks += 1
        date = f"{BASE_TIMESTAMP + self._ticks * 60} +0000"
        env = {
            **os.environ,
            "GIT_AUTHOR_DATE": date,
            "GIT_COMMITTER_DATE": date,
            "GIT_CONFIG_NOSYSTEM": "1",
        }
        result = subprocess.run(
            [
                "git",
                "-c",
                "user.name=Test",
                "-c",
                "user.email=test@test.com",
                "-c",
                "commit.gpgsign=false",
                "-c",
                "tag.gpgsign=false",
                "-c",
                "init.defaultBranch=main",
                *args,
            ],
            cwd=self.path,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def commit(self, message: str) -> None:
        self._git("commit", "--allow-empty", "--quiet", "-m", message)

    def tag(self, name: str) -> None:
        self._git("tag", name)

    def checkout_branch(self, name: str) -> None:
        self._git("checkout", "--quiet", "-b", name)


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepoBuilder:
    """Create an empty git repository in a temporary directory."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    return GitRepoBuilder(repo_dir)


@pytest.fixture
def mock_repo(tmp_path: Path) -> MagicMock:
    """Create a mock GitRepository."""
    repo = MagicMock(spec=GitRepository)
    repo.path = tmp_path
    return repo


@pytest.fixture
def config(tmp_path: Path) -> ChangelogPyConfig:
    """Default configuration writing into a temporary dist directory."""
    return ChangelogPyConfig(dist=tmp_path / "dist")


@pytest.fixture
def release_commits() -> list[Commit]:
    """Commits of a release, most recent first."""
    return [
        Commit("a1a1a1a", "this is not a Merge pull request"),
        Commit("b2b2b2b", "Merge pull request #999 from owner/some-branch"),
        Commit("c3c3c3c", "feat: added that thing"),
        Commit("d4d4d4d", "something about cArs we dont need"),
        Commit("e5e5e5e", "docs: whatever"),
        Commit("f6f6f6f", "ignored: whatever"),
        Commit("0a0a0a0", "fixed bug 2"),
        Commit("1b1b1b1", "added feature 1"),
    ]


@pytest.fixture
def exclude_patterns() -> list[str]:
    return ["docs:", "ignored:", "(?i)cars", "^Merge pull request"]
