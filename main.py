"""CLI entry point for inspecting recordings and mismatch artifacts."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from config.settings import get_settings
from recorder.allocator import ArtifactAllocator
from recorder.errors import PathNotFoundError
from recorder.paths import resolve_upward


console = Console()


def _allocator(root: str | None) -> ArtifactAllocator:
    settings = get_settings()
    return ArtifactAllocator(settings.mismatch_prefix, root or settings.mismatch_root)


@click.group()
@click.version_option(version="1.0.0")
def cli() -> None:
    """datarecorder - golden file recording helpers."""
    pass


@cli.command()
@click.argument("fragment")
def resolve(fragment: str) -> None:
    """Show where FRAGMENT resolves when searched upward from the cwd."""
    try:
        path = resolve_upward(fragment)
    except PathNotFoundError as e:
        console.print(f"[red]Not found:[/red] {fragment}")
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Searched")
        for i, candidate in enumerate(e.searched_paths, 1):
            table.add_row(str(i), str(candidate))
        console.print(table)
        sys.exit(1)

    console.print(f"[green]Found:[/green] {path}")


@cli.command()
@click.option("--root", default=None, help="Artifact root (defaults to settings)")
def mismatches(root: str | None) -> None:
    """List mismatch artifact directories and their files."""
    allocator = _allocator(root)
    directories = allocator.existing()

    if not directories:
        console.print(f"[dim]No mismatch artifacts in {allocator.root}[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Directory")
    table.add_column("Files")
    for directory in directories:
        files = sorted(p.name for p in directory.iterdir())
        table.add_row(str(directory), "\n".join(files) or "-")

    console.print(Panel(f"{len(directories)} mismatch directories", title="Mismatches"))
    console.print(table)


@cli.command()
@click.option("--root", default=None, help="Artifact root (defaults to settings)")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
def clean(root: str | None, yes: bool) -> None:
    """Delete all mismatch artifact directories."""
    allocator = _allocator(root)
    directories = allocator.existing()

    if not directories:
        console.print("[dim]Nothing to clean.[/dim]")
        return

    if not yes and not click.confirm(f"Delete {len(directories)} directories?"):
        console.print("[yellow]Aborted.[/yellow]")
        return

    for directory in directories:
        shutil.rmtree(directory)
    console.print(f"[green]Removed {len(directories)} directories from {allocator.root}[/green]")


def _print_file(path: Path) -> None:
    console.print(Panel(Text(path.read_text(encoding="utf-8")), title=str(path)))


@cli.command()
@click.argument("index", type=int)
@click.option("--root", default=None, help="Artifact root (defaults to settings)")
def show(index: int, root: str | None) -> None:
    """Print the files of mismatch directory INDEX."""
    directory = _allocator(root).candidate(index)
    if not directory.is_dir():
        console.print(f"[red]No such mismatch directory:[/red] {directory}")
        sys.exit(1)

    for path in sorted(directory.iterdir()):
        if path.suffix == ".html":
            console.print(f"[bold]Diff:[/bold] {path.as_uri()}")
        else:
            _print_file(path)


if __name__ == "__main__":
    cli()
