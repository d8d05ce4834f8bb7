"""CLI entry point for plugin-tools.

Invoked as::

    plugin-tools [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m plugin_tools.cli.main

Commands
--------
pubspec-check   Check that pubspecs follow repository conventions
version         Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _split_names(value: str | None) -> list[str]:
    """Split a comma-separated option value into names."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def _echo(line: str) -> None:
    """Print one line of command output verbatim."""
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="plugin-tools")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Monorepo maintenance tools for plugin packages."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from plugin_tools import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]plugin-tools[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# pubspec-check command
# ---------------------------------------------------------------------------


@cli.command(name="pubspec-check")
@click.option(
    "--packages-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("packages"),
    show_default=True,
    envvar="PLUGIN_TOOLS_PACKAGES_DIR",
    help="Directory containing the packages to check",
)
@click.option(
    "--packages",
    "include",
    default=None,
    help="Comma-separated list of packages to check (default: all)",
)
@click.option(
    "--exclude",
    default=None,
    help="Comma-separated list of packages to skip",
)
def pubspec_check_command(packages_dir: Path, include: str | None, exclude: str | None) -> None:
    """Check that pubspecs follow repository conventions."""
    from plugin_tools.commands import PubspecCheckCommand
    from plugin_tools.packages import DirectoryPackageLister, PackagesDirectoryError

    lister = DirectoryPackageLister(
        packages_dir,
        include=_split_names(include),
        exclude=_split_names(exclude),
    )
    command = PubspecCheckCommand(lister, packages_dir=packages_dir, echo=_echo)

    try:
        status = command.run()
    except PackagesDirectoryError as exc:
        err_console.print(f"[red]Error:[/red] {exc}", highlight=False)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    cli()
