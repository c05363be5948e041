"""Exception hierarchy for changelog-py.

Every error raised by the library derives from :class:`ChangelogPyError`
so callers can catch the whole family at once. Messages from underlying
tools (git, the regex compiler, Jinja2, the filesystem) are passed
through unchanged.
"""

from __future__ import annotations


class ChangelogPyError(Exception):
    """Base class for all changelog-py errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(ChangelogPyError):
    """Invalid or missing configuration."""


class ConfigNotFoundError(ConfigError):
    """pyproject.toml could not be located or read."""


class ConfigValidationError(ConfigError):
    """Configuration values failed validation."""


class InvalidSortDirectionError(ConfigError):
    """Changelog sort direction is not one of '', 'asc' or 'desc'."""

    def __init__(self, value: str) -> None:
        super().__init__("invalid sort direction")
        self.value = value


class FilterPatternError(ConfigError):
    """An exclude filter is not a valid regular expression."""

    def __init__(self, message: str, *, pattern: str) -> None:
        super().__init__(message)
        self.pattern = pattern


# =============================================================================
# Revision range resolution
# =============================================================================


class ResolutionError(ChangelogPyError):
    """The release range could not be determined."""


class NoTagsFoundError(ResolutionError):
    """The repository has no tags at all."""

    def __init__(self) -> None:
        super().__init__("no tags found")


class TagNotFoundError(ResolutionError):
    """The requested current tag does not exist in the repository."""


# =============================================================================
# Git / files / templates
# =============================================================================


class GitError(ChangelogPyError):
    """A git command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        if self.stderr:
            return f"{self.args[0]}: {self.stderr.strip()}"
        return str(self.args[0])


class ChangelogFileError(ChangelogPyError):
    """A release notes, header or footer file could not be read."""


class TemplateRenderError(ChangelogPyError):
    """A release notes, header or footer template failed to render."""
