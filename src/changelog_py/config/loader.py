"""Loading configuration from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from changelog_py.config.models import ChangelogPyConfig
from changelog_py.exceptions import ConfigNotFoundError, ConfigValidationError

TOOL_KEY = "changelog-py"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or any of its parents.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {start} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file cannot be read
        ConfigValidationError: If the file is not valid TOML
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigNotFoundError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_changelog_py_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.changelog-py]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_KEY, {})


def load_config(path: Path | None = None) -> ChangelogPyConfig:
    """Load configuration for the project at ``path``.

    A project without pyproject.toml, or without a ``[tool.changelog-py]``
    table, gets the default configuration. ``project_name`` falls back to
    ``[project].name``.

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        return ChangelogPyConfig()

    data = load_pyproject_toml(pyproject_path)
    raw = dict(extract_changelog_py_config(data))
    if "project_name" not in raw:
        name = data.get("project", {}).get("name")
        if name:
            raw["project_name"] = name

    try:
        return ChangelogPyConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_KEY}] in {pyproject_path}:\n{e}") from e
