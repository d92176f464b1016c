"""Implementation of the 'status' and 'next-version' commands.

Both are read-only: they report on the repository and never touch it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from release_cut.config import load_config
from release_cut.core.commits import get_breaking_changes, group_commits_by_kind
from release_cut.core.release import ReleaseResolver
from release_cut.exceptions import ReleaseCutError
from release_cut.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from release_cut.core.commits import ParsedCommit


def run_status(
    path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the status command.

    Args:
        path: Optional path to the project directory
        console: Console for standard output
        err_console: Console for error output
    """
    resolver = _make_resolver(path, err_console)

    try:
        tag, commits = resolver.resolve_commit_range()
    except ReleaseCutError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if tag is None:
        console.print(
            "[yellow]No release tags found.[/] This will be the first release; "
            "there is nothing to compare against."
        )
        return

    console.print(f"Latest release: [cyan]{escape(tag.name)}[/] ({tag.target[:7]})")

    if not commits:
        console.print("[yellow]No commits found since last release. Nothing to do.[/]")
        return

    parsed, malformed = resolver.classify(commits)
    console.print(f"Commits since {escape(tag.name)}: [bold]{len(commits)}[/]\n")

    if parsed:
        console.print(_commit_table(parsed))
        counts = ", ".join(
            f"{kind}: {len(group)}" for kind, group in sorted(group_commits_by_kind(parsed).items())
        )
        console.print(f"By kind: {counts}")

        breaking = get_breaking_changes(parsed)
        if breaking:
            console.print(f"[red]{len(breaking)} breaking change(s)[/]")

    if malformed:
        first_lines = [escape(message.split("\n", 1)[0]) for message in malformed]
        console.print(
            Panel(
                "\n".join(f"  • {line}" for line in first_lines),
                title=f"[yellow]{len(malformed)} commit(s) not in conventional format[/]",
                border_style="yellow",
            )
        )

    next_version = resolver.propose_next_version(tag)
    console.print(f"\nProposed next version: [green]{next_version}[/]")


def run_next_version(
    path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Print the proposed next version and nothing else.

    Args:
        path: Optional path to the project directory
        console: Console for standard output
        err_console: Console for error output
    """
    resolver = _make_resolver(path, err_console)

    try:
        tag = resolver.resolve_latest_tag()
    except ReleaseCutError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if tag is None:
        err_console.print("[red]Error:[/] No release tags found; pass the first version explicitly.")
        raise SystemExit(1)

    console.print(resolver.propose_next_version(tag), highlight=False)


def _make_resolver(path: str | None, err_console: Console) -> ReleaseResolver:
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
    except ReleaseCutError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    try:
        repo = GitRepository(project_path)
    except ReleaseCutError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    return ReleaseResolver(repo, config)


def _commit_table(parsed: list[ParsedCommit]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Commit", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Breaking")
    table.add_column("Summary")

    for pc in parsed:
        table.add_row(
            pc.commit.short_sha,
            str(pc.kind),
            "[red]yes[/]" if pc.breaking else "",
            escape(pc.commit.summary),
        )
    return table
