"""Core business logic for changelog-py.

This module contains the fundamental building blocks:
- Release range resolution from tag history
- Commit filtering and ordering
- Provider-specific entry formatting
- Header/footer/release notes templating
- Changelog orchestration
"""

from __future__ import annotations

from changelog_py.core.changelog import (
    ChangelogDocument,
    ChangelogResult,
    ChangelogStatus,
    build_entries,
    build_release_notes,
)
from changelog_py.core.context import ReleaseContext
from changelog_py.core.filters import FilterSet, apply_filters, build_filter_set
from changelog_py.core.formatting import Provider, format_entries, format_entry
from changelog_py.core.sorting import SortDirection, parse_sort_direction, sort_commits
from changelog_py.core.tags import RevisionRange, resolve_range
from changelog_py.core.templates import build_template_context, render_file, render_template

__all__ = [
    # Changelog
    "ChangelogDocument",
    "ChangelogResult",
    "ChangelogStatus",
    # Filters
    "FilterSet",
    # Formatting
    "Provider",
    # Context
    "ReleaseContext",
    # Tags
    "RevisionRange",
    # Sorting
    "SortDirection",
    "apply_filters",
    "build_entries",
    "build_filter_set",
    "build_release_notes",
    # Templates
    "build_template_context",
    "format_entries",
    "format_entry",
    "parse_sort_direction",
    "render_file",
    "render_template",
    "resolve_range",
    "sort_commits",
]
