"""Resolution of the previous and current release tags."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from changelog_py.exceptions import NoTagsFoundError, TagNotFoundError

if TYPE_CHECKING:
    from changelog_py.vcs import LogProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RevisionRange:
    """Commits after ``previous`` up to and including ``current``.

    ``previous`` is None for the first release, meaning the range starts at
    the repository root.
    """

    previous: str | None
    current: str

    @property
    def is_first_release(self) -> bool:
        return self.previous is None

    def __str__(self) -> str:
        if self.previous is None:
            return self.current
        return f"{self.previous}..{self.current}"


def resolve_range(
    provider: LogProvider,
    current_tag: str,
    previous_tag_override: str | None = None,
) -> RevisionRange:
    """Determine the revision range for the release of ``current_tag``.

    Args:
        provider: Source of the repository's tags
        current_tag: Tag being released; empty means the newest tag
        previous_tag_override: Used verbatim as the previous tag when non-empty

    Returns:
        The resolved range

    Raises:
        NoTagsFoundError: If the repository has no tags
        TagNotFoundError: If ``current_tag`` is not one of the repository's tags
    """
    tags = provider.list_tags()
    if not tags:
        raise NoTagsFoundError

    if not current_tag:
        current_tag = tags[-1]
        logger.debug("no current tag given, using latest tag %s", current_tag)
    elif current_tag not in tags:
        raise TagNotFoundError(f"tag {current_tag!r} not found in repository")

    if previous_tag_override:
        logger.info("using previous tag override %s", previous_tag_override)
        return RevisionRange(previous=previous_tag_override, current=current_tag)

    index = tags.index(current_tag)
    if index == 0:
        logger.info("%s is the first release, using the full history", current_tag)
        return RevisionRange(previous=None, current=current_tag)

    return RevisionRange(previous=tags[index - 1], current=current_tag)
