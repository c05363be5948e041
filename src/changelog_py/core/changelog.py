"""Changelog generation from git history.

This module ties the pieces together: it resolves the release range,
collects and filters commits, orders and formats them, wraps the result
in the optional header and footer templates and writes ``CHANGELOG.md``
into the release output directory.

A release notes file supplied by the user replaces all of this: it is
rendered as a template and used as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from changelog_py.core.filters import apply_filters, build_filter_set
from changelog_py.core.formatting import format_entries
from changelog_py.core.sorting import parse_sort_direction, sort_commits
from changelog_py.core.tags import RevisionRange, resolve_range
from changelog_py.core.templates import (
    build_template_context,
    read_template_file,
    render_file,
    render_template,
)
from changelog_py.vcs import commits_between

if TYPE_CHECKING:
    from pathlib import Path

    from changelog_py.config.models import ChangelogPyConfig
    from changelog_py.core.context import ReleaseContext
    from changelog_py.core.filters import FilterSet
    from changelog_py.core.formatting import Provider
    from changelog_py.core.sorting import SortDirection
    from changelog_py.vcs import LogProvider

logger = logging.getLogger(__name__)

CHANGELOG_HEADING = "## Changelog"


class ChangelogStatus(StrEnum):
    """How a build ended."""

    GENERATED = "generated"
    PROVIDED = "provided"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ChangelogResult:
    """Outcome of :func:`build_release_notes`.

    Attributes:
        status: Whether notes were generated, provided by the user or skipped
        release_notes: Final release notes text ("" when skipped without a
            user-supplied file)
        path: Where the changelog was written, for generated changelogs
        skip_reason: Why the build was skipped
        revision_range: The range the changelog covers, for generated changelogs
    """

    status: ChangelogStatus
    release_notes: str = ""
    path: Path | None = None
    skip_reason: str | None = None
    revision_range: RevisionRange | None = None

    @property
    def skipped(self) -> bool:
        return self.status is ChangelogStatus.SKIPPED


@dataclass(frozen=True)
class ChangelogDocument:
    """Header, body entries and footer of a generated changelog."""

    entries: tuple[str, ...]
    header: str | None = None
    footer: str | None = None

    def render(self) -> str:
        body = "\n".join(self.entries)
        elements = [f"{CHANGELOG_HEADING}\n\n{body}\n"]
        if self.header:
            elements.insert(0, self.header)
        if self.footer:
            elements.append(self.footer)
        return "\n".join(elements)


def build_entries(
    provider: LogProvider,
    revision_range: RevisionRange,
    *,
    filter_set: FilterSet,
    direction: SortDirection,
    markdown_provider: Provider,
) -> list[str]:
    """Collect, filter, sort and format the commits of a release.

    Args:
        provider: Source of commits
        revision_range: Range of the release
        filter_set: Compiled exclude filters
        direction: Sort direction
        markdown_provider: Hosting service the lines are formatted for

    Returns:
        Formatted changelog lines

    Raises:
        GitError: If reading history fails
    """
    commits = commits_between(provider, revision_range)
    kept = apply_filters(filter_set, commits)
    if len(kept) != len(commits):
        logger.debug("filtered out %d commits", len(commits) - len(kept))
    return format_entries(sort_commits(direction, kept), markdown_provider)


def build_release_notes(
    provider: LogProvider,
    config: ChangelogPyConfig,
    context: ReleaseContext,
) -> ChangelogResult:
    """Build the release notes for a release.

    A release notes file is loaded and rendered before the skip and
    snapshot checks, so a skipped result still carries its content for
    later steps. The flip side is that an unreadable release notes file
    fails the build even when the changelog is skipped. Without a release
    notes file, skipping never touches the filesystem or git.

    Args:
        provider: Source of tags and commits
        config: Project configuration
        context: What is being released and user-supplied files

    Returns:
        The build outcome. Skipped builds are reported through
        ``ChangelogResult.status``, never raised.

    Raises:
        ChangelogPyError: Any failure; nothing is written in that case
    """
    project_name = context.project_name or config.project_name or ""
    notes = None
    if context.release_notes_file is not None:
        notes = render_file(
            context.release_notes_file,
            build_template_context(current_tag=context.current_tag, project_name=project_name),
        )
        logger.info("loaded custom release notes from %s", context.release_notes_file)
        logger.debug("custom release notes:\n%s", notes)

    if config.changelog.skip:
        return _skipped("changelog should not be built", notes)
    if context.snapshot:
        return _skipped("not available for snapshots", notes)

    if notes is not None:
        return ChangelogResult(status=ChangelogStatus.PROVIDED, release_notes=notes)

    # Fail on configuration and missing files before touching git.
    direction = parse_sort_direction(config.changelog.sort)
    filter_set = build_filter_set(config.changelog.filters.exclude)
    header_text = _read_optional(context.release_header_file)
    footer_text = _read_optional(context.release_footer_file)

    revision_range = resolve_range(provider, context.current_tag, context.previous_tag_override)
    logger.info("building changelog for %s", revision_range)

    entries = build_entries(
        provider,
        revision_range,
        filter_set=filter_set,
        direction=direction,
        markdown_provider=config.provider,
    )

    template_context = build_template_context(
        current_tag=revision_range.current,
        previous_tag=revision_range.previous,
        project_name=project_name,
    )
    document = ChangelogDocument(
        entries=tuple(entries),
        header=render_template(header_text, template_context) if header_text else None,
        footer=render_template(footer_text, template_context) if footer_text else None,
    )
    release_notes = document.render()

    path = config.effective_changelog_path
    logger.info("writing %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(release_notes, encoding="utf-8")

    return ChangelogResult(
        status=ChangelogStatus.GENERATED,
        release_notes=release_notes,
        path=path,
        revision_range=revision_range,
    )


def _read_optional(path: Path | None) -> str | None:
    if path is None:
        return None
    text = read_template_file(path)
    logger.debug("loaded %s", path)
    return text


def _skipped(reason: str, notes: str | None) -> ChangelogResult:
    logger.info("skipped: %s", reason)
    return ChangelogResult(
        status=ChangelogStatus.SKIPPED,
        release_notes=notes or "",
        skip_reason=reason,
    )
