"""Version control access for changelog-py.

The changelog core never talks to git directly. It depends on the
:class:`LogProvider` protocol, which :class:`GitRepository` implements by
shelling out to ``git``; tests substitute an in-memory provider.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from changelog_py.vcs.git import Commit, GitRepository

if TYPE_CHECKING:
    from changelog_py.core.tags import RevisionRange

logger = logging.getLogger(__name__)


class LogProvider(Protocol):
    """Source of tags and commit history."""

    def list_tags(self) -> list[str]:
        """Return tag names ordered by creation, oldest first."""
        ...

    def log(self, from_rev: str | None, to_rev: str) -> list[Commit]:
        """Return commits in ``from_rev..to_rev``, most recent first.

        ``from_rev=None`` means from the repository root.
        """
        ...


def commits_between(provider: LogProvider, revision_range: RevisionRange) -> list[Commit]:
    """Return the commits introduced by a release, most recent first.

    Errors from the provider propagate unchanged.
    """
    commits = provider.log(revision_range.previous, revision_range.current)
    logger.debug(
        "found %d commits between %s and %s",
        len(commits),
        revision_range.previous or "<root>",
        revision_range.current,
    )
    return commits


__all__ = [
    "Commit",
    "GitRepository",
    "LogProvider",
    "commits_between",
]
