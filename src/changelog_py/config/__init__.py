"""Configuration management for changelog-py."""

from __future__ import annotations

from changelog_py.config.loader import load_config
from changelog_py.config.models import (
    CHANGELOG_FILENAME,
    ChangelogConfig,
    ChangelogPyConfig,
    FiltersConfig,
)

__all__ = [
    "CHANGELOG_FILENAME",
    "ChangelogConfig",
    "ChangelogPyConfig",
    "FiltersConfig",
    "load_config",
]
