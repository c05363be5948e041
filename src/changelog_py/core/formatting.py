"""Rendering of commits into changelog lines."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from changelog_py.vcs.git import Commit

# Markdown treats two or more trailing spaces as a hard line break.
HARD_BREAK = "   "


class Provider(StrEnum):
    """Hosting service whose markdown flavor the release notes target."""

    GITHUB = "github"
    GITLAB = "gitlab"
    GITEA = "gitea"

    @property
    def requires_hard_breaks(self) -> bool:
        """Whether consecutive lines collapse into one paragraph without padding."""
        return self in (Provider.GITLAB, Provider.GITEA)


def format_entry(commit: Commit, *, is_last: bool, provider: Provider) -> str:
    """Format one commit as ``"<sha> <subject>"``.

    Every line but the last is padded with trailing spaces when the
    provider needs explicit hard breaks.
    """
    line = f"{commit.sha} {commit.subject}"
    if provider.requires_hard_breaks and not is_last:
        line += HARD_BREAK
    return line


def format_entries(commits: Sequence[Commit], provider: Provider) -> list[str]:
    last = len(commits) - 1
    return [
        format_entry(commit, is_last=index == last, provider=provider)
        for index, commit in enumerate(commits)
    ]
