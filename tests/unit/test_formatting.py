"""Tests for changelog entry formatting."""

from __future__ import annotations

import pytest

from changelog_py.core.formatting import HARD_BREAK, Provider, format_entries, format_entry
from changelog_py.vcs.git import Commit

COMMITS = [Commit("abc1234", "fixed bug 2"), Commit("def5678", "added feature 1")]


class TestProvider:
    """Tests for Provider."""

    @pytest.mark.parametrize(
        ("provider", "expected"),
        [(Provider.GITHUB, False), (Provider.GITLAB, True), (Provider.GITEA, True)],
    )
    def test_requires_hard_breaks(self, provider: Provider, expected: bool):
        """GitLab and Gitea need explicit markdown line breaks."""
        assert provider.requires_hard_breaks is expected

    def test_from_string(self):
        """Providers are addressed by their lowercase name."""
        assert Provider("gitlab") is Provider.GITLAB


class TestFormatEntry:
    """Tests for format_entry()."""

    def test_plain(self):
        """Line is hash, space, subject."""
        line = format_entry(COMMITS[0], is_last=False, provider=Provider.GITHUB)
        assert line == "abc1234 fixed bug 2"

    def test_hard_break_padding(self):
        """Non-last GitLab lines get trailing spaces."""
        line = format_entry(COMMITS[0], is_last=False, provider=Provider.GITLAB)
        assert line == "abc1234 fixed bug 2" + HARD_BREAK
        assert len(HARD_BREAK) >= 2
        assert HARD_BREAK.strip() == ""

    def test_last_line_not_padded(self):
        """The last line is never padded."""
        line = format_entry(COMMITS[1], is_last=True, provider=Provider.GITLAB)
        assert line == "def5678 added feature 1"


class TestFormatEntries:
    """Tests for format_entries()."""

    def test_hard_breaks(self):
        """Only the last of two lines is unpadded."""
        lines = format_entries(COMMITS, Provider.GITEA)

        assert lines[0].endswith("fixed bug 2   ")
        assert lines[1] == lines[1].rstrip()

    def test_plain_never_padded(self):
        """GitHub lines carry no trailing whitespace."""
        lines = format_entries(COMMITS, Provider.GITHUB)

        assert lines == ["abc1234 fixed bug 2", "def5678 added feature 1"]

    def test_single_entry(self):
        """A single entry is also the last one."""
        assert format_entries(COMMITS[:1], Provider.GITLAB) == ["abc1234 fixed bug 2"]

    def test_empty(self):
        """No commits, no lines."""
        assert format_entries([], Provider.GITLAB) == []
