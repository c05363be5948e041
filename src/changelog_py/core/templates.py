"""Template rendering for release notes, headers and footers.

User-supplied files are Jinja2 templates rendered against the release
context, for example::

    ## {{ project_name }} {{ tag }}

    Changes since {{ previous_tag }}.

Undefined variables are errors rather than silently rendering empty.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, StrictUndefined, TemplateError

from changelog_py.exceptions import ChangelogFileError, TemplateRenderError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SEMVER_RE = re.compile(r"^v?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)")

_environment = Environment(
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def build_template_context(
    *,
    current_tag: str,
    previous_tag: str | None = None,
    project_name: str = "",
    now: datetime | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Build the variables available to release templates.

    Args:
        current_tag: Tag being released
        previous_tag: Previous release tag, if known
        project_name: Name of the project
        now: Build time, defaults to the current UTC time
        environ: Environment variables, defaults to ``os.environ``

    Returns:
        Mapping of template variable names to values
    """
    now = now or datetime.now(UTC)
    match = SEMVER_RE.match(current_tag)
    major, minor, patch = (
        (int(match["major"]), int(match["minor"]), int(match["patch"])) if match else (0, 0, 0)
    )
    return {
        "project_name": project_name,
        "tag": current_tag,
        "current_tag": current_tag,
        "previous_tag": previous_tag or "",
        "version": current_tag.removeprefix("v"),
        "major": major,
        "minor": minor,
        "patch": patch,
        "date": now.strftime("%Y-%m-%d"),
        "timestamp": int(now.timestamp()),
        "env": dict(os.environ if environ is None else environ),
    }


def render_template(text: str, context: Mapping[str, Any]) -> str:
    """Render template text.

    Raises:
        TemplateRenderError: On malformed syntax or an undefined variable,
            with Jinja2's message unchanged
    """
    try:
        return _environment.from_string(text).render(context)
    except TemplateError as e:
        raise TemplateRenderError(str(e)) from e


def read_template_file(path: Path) -> str:
    """Read a user-supplied template file.

    Raises:
        ChangelogFileError: If the file cannot be read; the message is the
            underlying OS error, which names the path
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ChangelogFileError(str(e)) from e


def render_file(path: Path, context: Mapping[str, Any]) -> str:
    """Read and render a template file."""
    rendered = render_template(read_template_file(path), context)
    logger.debug("rendered %s", path)
    return rendered
