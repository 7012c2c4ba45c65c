"""
Rendering functions for starred-repos output.

This module handles all terminal printing.
Services return Repo records, this module makes them human-readable.
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .domain.repo import Repo

console = Console()


def sort_by_stars(repos: List[Repo]) -> List[Repo]:
    """
    Sort repos by star count, most starred first.

    The sort is stable: repos with equal star counts keep their input order.
    """
    return sorted(repos, key=lambda repo: repo.star_count, reverse=True)


def list_repos(repos: List[Repo], out: Optional[Console] = None) -> None:
    """
    Print repos to the terminal, most starred first.

    Args:
        repos: Repos to print
        out: Console to print to (module console by default)
    """
    if out is None:
        out = console

    if not repos:
        out.print("[yellow]No starred repositories found.[/yellow]")
        return

    # soft_wrap keeps each field on one line whatever the width
    for repo in sort_by_stars(repos):
        out.print(f"[bold]{escape(repo.name)}[/bold]", soft_wrap=True)
        out.print(f"\t[yellow]Stars:       [/yellow]{repo.star_count}", soft_wrap=True)
        out.print(f"\t[blue]Description: [/blue]{escape(repo.description)}", soft_wrap=True)
        out.print(f"\t[green]URL:         [/green]{escape(repo.url)}", soft_wrap=True)
