"""Main CLI entry point for changelog-py."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from changelog_py import __version__
from changelog_py.core.formatting import Provider

console = Console()
err_console = Console(stderr=True)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="changelog-py")
def cli(verbose: bool) -> None:
    """changelog-py - release notes from git history."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@cli.command()
@click.option("--path", "-p", type=click.Path(file_okay=False), help="Project directory")
@click.option("--tag", "-t", help="Tag being released (defaults to the latest tag)")
@click.option(
    "--previous-tag",
    envvar="CHANGELOG_PY_PREVIOUS_TAG",
    help="Previous tag to diff against instead of the one found in tag history",
)
@click.option(
    "--release-notes",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Use this file (a template) as the complete release notes",
)
@click.option(
    "--release-header",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Template prepended to the generated changelog",
)
@click.option(
    "--release-footer",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Template appended to the generated changelog",
)
@click.option(
    "--provider",
    type=click.Choice([p.value for p in Provider]),
    help="Hosting provider whose markdown flavor to target",
)
@click.option("--dist", type=click.Path(file_okay=False, path_type=Path), help="Output directory")
@click.option("--snapshot", is_flag=True, help="Snapshot build; no changelog is generated")
@click.option("--print", "print_notes", is_flag=True, help="Print the release notes")
def build(
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
) -> None:
    """Generate release notes and write CHANGELOG.md."""
    from changelog_py.cli.commands.build import run_build

    run_build(
        path=path,
        tag=tag,
        previous_tag=previous_tag,
        release_notes=release_notes,
        release_header=release_header,
        release_footer=release_footer,
        provider=provider,
        dist=dist,
        snapshot=snapshot,
        print_notes=print_notes,
        console=console,
        err_console=err_console,
    )


def main() -> None:
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
