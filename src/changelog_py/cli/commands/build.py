"""Implementation of the 'build' command.

The build command generates the release notes for a tag and writes
``CHANGELOG.md`` into the release output directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from changelog_py.config import load_config
from changelog_py.core.changelog import ChangelogStatus, build_release_notes
from changelog_py.core.context import ReleaseContext
from changelog_py.core.formatting import Provider
from changelog_py.exceptions import ChangelogPyError
from changelog_py.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console


def run_build(
    path: str | None,
    tag: str | None,
    previous_tag: str | None,
    release_notes: Path | None,
    release_header: Path | None,
    release_footer: Path | None,
    provider: str | None,
    dist: Path | None,
    snapshot: bool,
    print_notes: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the build command.

    Args:
        path: Optional path to project directory
        tag: Tag being released (defaults to the latest tag)
        previous_tag: Previous tag override
        release_notes: File with complete release notes
        release_header: Header template file
        release_footer: Footer template file
        provider: Hosting provider override ("github", "gitlab", "gitea")
        dist: Output directory override
        snapshot: Whether this is a snapshot build
        print_notes: Echo the release notes to stdout
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
    except ChangelogPyError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    overrides: dict[str, object] = {"dist": project_path / (dist or config.dist)}
    if provider:
        overrides["provider"] = Provider(provider)
    config = config.model_copy(update=overrides)

    context = ReleaseContext(
        current_tag=tag or "",
        previous_tag_override=previous_tag or None,
        snapshot=snapshot,
        release_notes_file=release_notes,
        release_header_file=release_header,
        release_footer_file=release_footer,
        project_name=config.project_name or "",
    )

    try:
        result = build_release_notes(GitRepository(project_path), config, context)
    except ChangelogPyError as e:
        err_console.print(f"[red]Error generating changelog:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if result.status is ChangelogStatus.SKIPPED:
        console.print(f"[yellow]Changelog skipped:[/] {escape(result.skip_reason or '')}")
    elif result.status is ChangelogStatus.PROVIDED:
        console.print(f"  [green]✓[/] Using release notes from [cyan]{release_notes}[/]")
    else:
        console.print(
            Panel(
                f"[green]Changelog for {result.revision_range} written to[/] "
                f"[cyan]{result.path}[/]",
                title="[green]Changelog[/]",
                border_style="green",
            )
        )

    if print_notes and result.release_notes:
        console.print(result.release_notes, markup=False, highlight=False, soft_wrap=True)
