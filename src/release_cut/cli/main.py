"""release-cut command line entry point."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from release_cut import __version__
from release_cut.cli.commands.status import run_next_version, run_status
from release_cut.log_setup import setup_logging

app = typer.Typer(
    name="release-cut",
    help="Inspect what changed since the last release.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

PathArgument = Annotated[
    str | None,
    typer.Argument(help="Project directory (default: current directory)"),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"release-cut {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Inspect what changed since the last release."""
    setup_logging(is_verbose=verbose, console=err_console)


@app.command()
def status(path: PathArgument = None) -> None:
    """Show the latest release, the commits since, and how they classify."""
    run_status(path, console, err_console)


@app.command("next-version")
def next_version(path: PathArgument = None) -> None:
    """Print the proposed next version."""
    run_next_version(path, console, err_console)
