"""Per-invocation inputs of a changelog build."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ReleaseContext:
    """What is being released and which user-supplied files to use.

    Attributes:
        current_tag: Tag of the release being built; empty means latest tag
        previous_tag_override: Previous tag to use instead of the one found
            in tag history
        snapshot: Snapshot builds never produce a changelog
        release_notes_file: Complete release notes replacing the generated ones
        release_header_file: Template prepended to the generated changelog
        release_footer_file: Template appended to the generated changelog
        project_name: Exposed to templates as ``project_name``
    """

    current_tag: str = ""
    previous_tag_override: str | None = None
    snapshot: bool = False
    release_notes_file: Path | None = None
    release_header_file: Path | None = None
    release_footer_file: Path | None = None
    project_name: str = ""
