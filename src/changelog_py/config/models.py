"""Configuration models for changelog-py.

Configuration lives in ``[tool.changelog-py]`` of pyproject.toml::

    [tool.changelog-py]
    dist = "dist"
    provider = "gitlab"

    [tool.changelog-py.changelog]
    sort = "asc"

    [tool.changelog-py.changelog.filters]
    exclude = ["^docs:", "(?i)typo"]
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from changelog_py.core.formatting import Provider

CHANGELOG_FILENAME = "CHANGELOG.md"


class FiltersConfig(BaseModel):
    """Commit filters applied to the changelog."""

    model_config = ConfigDict(extra="forbid")

    exclude: list[str] = Field(
        default_factory=list,
        description="Regular expressions; commits whose subject matches any are dropped",
    )


class ChangelogConfig(BaseModel):
    """Changelog generation settings."""

    model_config = ConfigDict(extra="forbid")

    skip: bool = Field(default=False, description="Do not build a changelog")
    # Checked when the changelog is built so that the error is reported
    # as an invalid sort direction rather than a schema failure.
    sort: str = Field(default="", description="'', 'asc' or 'desc'")
    filters: FiltersConfig = Field(default_factory=FiltersConfig)


class ChangelogPyConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    project_name: str | None = None
    dist: Path = Field(default=Path("dist"), description="Release output directory")
    provider: Provider = Field(
        default=Provider.GITHUB,
        description="Hosting service whose markdown flavor is targeted",
    )
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)

    @property
    def effective_changelog_path(self) -> Path:
        """Path of the generated changelog file."""
        return self.dist / CHANGELOG_FILENAME
