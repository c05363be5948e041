"""Git access through the ``git`` command line.

Only the two read operations needed to build a changelog are exposed:
listing tags in creation order and listing commits between two revisions.
git is called as a subprocess and its output is parsed here.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from changelog_py.exceptions import GitError

logger = logging.getLogger(__name__)

# %h and %s are separated by a single space; the abbreviated hash never
# contains one, so the first space always splits the two.
LOG_FORMAT = "--pretty=format:%h %s"


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit as shown in the changelog: abbreviated hash and subject line."""

    sha: str
    subject: str

    @classmethod
    def from_log_line(cls, line: str) -> Commit:
        sha, _, subject = line.partition(" ")
        return cls(sha=sha, subject=subject)


class GitRepository:
    """Read-only view of a local git repository.

    Args:
        path: Any directory inside the working tree.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else Path.cwd()

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    def _run(self, *args: str) -> str:
        cmd = ["git", *args]
        logger.debug("running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def list_tags(self) -> list[str]:
        """Return all tags, oldest first.

        Tags are ordered by creation date; tags created at the same moment
        fall back to version ordering so the result is deterministic.
        """
        output = self._run(
            "tag",
            "--list",
            "--sort=version:refname",
            "--sort=creatordate",
        )
        return [line.strip() for line in output.splitlines() if line.strip()]

    def log(self, from_rev: str | None, to_rev: str) -> list[Commit]:
        """Return commits reachable from ``to_rev`` but not ``from_rev``.

        Commits are returned most recent first. When ``from_rev`` is None the
        whole history up to ``to_rev`` is returned.
        """
        revision = f"{from_rev}..{to_rev}" if from_rev else to_rev
        output = self._run("log", LOG_FORMAT, "--no-color", revision, "--")
        return [Commit.from_log_line(line) for line in output.splitlines() if line]
