"""Tests for release template rendering."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from changelog_py.core.templates import (
    build_template_context,
    read_template_file,
    render_file,
    render_template,
)
from changelog_py.exceptions import ChangelogFileError, TemplateRenderError

if TYPE_CHECKING:
    from pathlib import Path


class TestBuildTemplateContext:
    """Tests for build_template_context()."""

    def test_release_values(self):
        """Tag-derived values are exposed."""
        now = datetime(2024, 5, 17, 12, 0, tzinfo=UTC)
        ctx = build_template_context(
            current_tag="v1.2.3",
            previous_tag="v1.2.2",
            project_name="demo",
            now=now,
            environ={"FOO": "bar"},
        )

        assert ctx["tag"] == "v1.2.3"
        assert ctx["current_tag"] == "v1.2.3"
        assert ctx["previous_tag"] == "v1.2.2"
        assert ctx["version"] == "1.2.3"
        assert (ctx["major"], ctx["minor"], ctx["patch"]) == (1, 2, 3)
        assert ctx["project_name"] == "demo"
        assert ctx["date"] == "2024-05-17"
        assert ctx["timestamp"] == int(now.timestamp())
        assert ctx["env"] == {"FOO": "bar"}

    def test_missing_previous_tag_is_empty(self):
        """A first release renders previous_tag as empty."""
        ctx = build_template_context(current_tag="v0.0.1")
        assert ctx["previous_tag"] == ""

    def test_non_semver_tag(self):
        """Non-semver tags get zero version parts."""
        ctx = build_template_context(current_tag="nightly")
        assert ctx["version"] == "nightly"
        assert (ctx["major"], ctx["minor"], ctx["patch"]) == (0, 0, 0)


class TestRenderTemplate:
    """Tests for render_template()."""

    def test_substitution(self):
        """Variables are substituted."""
        out = render_template("test header with tag {{ tag }}", {"tag": "v0.0.1"})
        assert out == "test header with tag v0.0.1"

    def test_trailing_newline_kept(self):
        """Content is reproduced exactly, including the final newline."""
        assert render_template("c0ff33 coffeee\n", {}) == "c0ff33 coffeee\n"

    def test_markdown_not_escaped(self):
        """Markdown and HTML-ish content is not escaped."""
        out = render_template("<b>{{ tag }}</b> & more", {"tag": "v1"})
        assert out == "<b>v1</b> & more"

    def test_syntax_error(self):
        """Malformed syntax raises TemplateRenderError."""
        with pytest.raises(TemplateRenderError) as excinfo:
            render_template("{{ tag ", {"tag": "v1"})

        assert str(excinfo.value) == str(excinfo.value.__cause__)

    def test_undefined_variable(self):
        """Unknown variables are errors."""
        with pytest.raises(TemplateRenderError, match="nope"):
            render_template("{{ nope }}", {"tag": "v1"})


class TestRenderFile:
    """Tests for read_template_file() and render_file()."""

    def test_render_file(self, tmp_path: Path):
        """File contents are rendered."""
        path = tmp_path / "changes.md"
        path.write_text("c0ff33 coffeee {{ tag }}\n")

        assert render_file(path, {"tag": "v0.0.1"}) == "c0ff33 coffeee v0.0.1\n"

    def test_missing_file(self, tmp_path: Path):
        """A missing file raises ChangelogFileError naming the path."""
        path = tmp_path / "changes.nope"

        with pytest.raises(ChangelogFileError) as excinfo:
            read_template_file(path)

        assert str(path) in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_directory_is_error(self, tmp_path: Path):
        """A directory cannot be read as a template."""
        with pytest.raises(ChangelogFileError):
            read_template_file(tmp_path)
