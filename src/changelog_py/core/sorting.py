"""Ordering of changelog commits."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import TYPE_CHECKING

from changelog_py.exceptions import InvalidSortDirectionError

if TYPE_CHECKING:
    from changelog_py.vcs.git import Commit


class SortDirection(StrEnum):
    """How changelog entries are ordered."""

    UNSPECIFIED = ""
    ASCENDING = "asc"
    DESCENDING = "desc"


def parse_sort_direction(value: str | None) -> SortDirection:
    """Convert a configured sort value to a :class:`SortDirection`.

    Raises:
        InvalidSortDirectionError: If value is not '', 'asc' or 'desc'
    """
    try:
        return SortDirection(value or "")
    except ValueError:
        raise InvalidSortDirectionError(str(value)) from None


def _sort_key(commit: Commit) -> tuple[str, str]:
    # Subjects can repeat; the hash keeps the order total.
    return (commit.subject, commit.sha)


def sort_commits(direction: SortDirection, commits: Iterable[Commit]) -> list[Commit]:
    """Order commits for display.

    UNSPECIFIED keeps the log order (most recent first). ASCENDING orders by
    subject and DESCENDING is its exact reverse.
    """
    if direction is SortDirection.UNSPECIFIED:
        return list(commits)
    return sorted(commits, key=_sort_key, reverse=direction is SortDirection.DESCENDING)
