"""Exclusion filtering of commits by subject.

Each configured pattern is a Python regular expression searched anywhere
in the commit subject. Patterns anchor only when they say so (``^docs:``)
and are case-sensitive unless they embed ``(?i)``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from changelog_py.exceptions import FilterPatternError

if TYPE_CHECKING:
    from changelog_py.vcs.git import Commit


@dataclass(frozen=True, slots=True)
class FilterSet:
    """Compiled exclude patterns, in configuration order."""

    patterns: tuple[re.Pattern[str], ...] = ()

    def excludes(self, subject: str) -> bool:
        return any(pattern.search(subject) for pattern in self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)


def build_filter_set(patterns: Iterable[str]) -> FilterSet:
    """Compile exclude patterns.

    Raises:
        FilterPatternError: On the first pattern that is not a valid regex.
            The regex compiler's message is kept as-is.
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise FilterPatternError(
                f"error parsing regexp: {e}: `{pattern}`",
                pattern=pattern,
            ) from e
    return FilterSet(tuple(compiled))


def apply_filters(filter_set: FilterSet, commits: Iterable[Commit]) -> list[Commit]:
    """Drop commits whose subject matches any pattern, keeping order."""
    return [commit for commit in commits if not filter_set.excludes(commit.subject)]
