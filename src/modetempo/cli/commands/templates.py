"""Template and mode listing commands."""

import click
from rich.console import Console
from rich.table import Table

from ...core.exceptions import CyclicHierarchyError
from .common import build_manager

console = Console()


@click.command("list-templates")
@click.option("-m", "--mode", default=None, help="Only templates active in this mode")
@click.pass_context
def list_templates(ctx, mode):
    """List registered templates.

    Examples:

        modetempo list-templates

        modetempo list-templates --mode c++
    """
    manager = build_manager(ctx)
    try:
        templates = manager.list_templates(mode)
    except CyclicHierarchyError as e:
        console.print(f"[red]Error:[/red] {e.message}: {' -> '.join(e.chain)}")
        raise click.Abort()

    title = f"Templates active in {mode}" if mode else "Registered Templates"
    table = Table(title=title)
    table.add_column("Tag", style="cyan")
    table.add_column("Owners", style="green")
    table.add_column("Qualified Name")
    table.add_column("Description")

    for t in templates:
        table.add_row(
            t["tag"],
            ", ".join(t["owners"]),
            t["qualified_name"],
            t.get("documentation", ""),
        )

    console.print(table)
    if not templates:
        console.print("[dim]No templates.[/dim]")


@click.command("modes")
@click.pass_context
def list_modes(ctx):
    """List known modes and their ancestor chains."""
    manager = build_manager(ctx)

    table = Table(title="Modes")
    table.add_column("Mode", style="cyan")
    table.add_column("Parent", style="green")
    table.add_column("Chain")
    table.add_column("Own Templates", justify="right")

    for m in manager.list_modes():
        table.add_row(
            m["name"],
            m["parent"] or "-",
            " -> ".join(m["chain"]),
            str(m["templates"]),
        )

    console.print(table)


@click.command("chain")
@click.argument("mode")
@click.pass_context
def chain(ctx, mode):
    """Print the ancestor chain of MODE, root first.

    Example:

        modetempo chain c++
    """
    manager = build_manager(ctx)
    try:
        click.echo(" ".join(manager.ancestor_chain(mode)))
    except CyclicHierarchyError as e:
        console.print(f"[red]Error:[/red] {e.message}: {' -> '.join(e.chain)}")
        raise click.Abort()
