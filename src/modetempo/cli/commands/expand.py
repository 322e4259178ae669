"""Expansion CLI command."""

import click
from rich.console import Console
from rich.table import Table

from ...core.exceptions import CyclicHierarchyError, TemplateError
from ...prompt import ConsolePrompt, ScriptedPrompt
from .common import build_manager

console = Console()


def _parse_region(value):
    if value is None:
        return None
    try:
        start, end = (int(part) for part in value.split(":", 1))
    except ValueError:
        raise click.BadParameter("expected START:END", param_hint="--region")
    return start, end


@click.command()
@click.argument("text", required=False)
@click.option("-m", "--mode", required=True, help="Content type of the buffer")
@click.option("-f", "--file", "input_file", type=click.Path(exists=True), help="Read buffer from file")
@click.option("-o", "--output", "output_file", type=click.Path(), help="Write result to file")
@click.option("--cursor", type=int, default=None, help="Point position (default: end of buffer)")
@click.option("--region", default=None, help="Select START:END before expanding")
@click.option("--choose", default=None, help="Tag to pick when a region is selected")
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output")
@click.pass_context
def expand(ctx, text, mode, input_file, output_file, cursor, region, choose, verbose):
    """Press the expand key once over a buffer.

    Without --region the tag before the cursor is expanded. With --region
    the template is wrapped around the selection; pick it with --choose
    or interactively.

    Examples:

        modetempo expand -m c "for"

        modetempo expand -m c -f main.c --region 10:42 --choose if

        modetempo expand -m markdown "see here" --region 4:8 --choose link -v
    """
    span = _parse_region(region)

    if input_file:
        with open(input_file) as f:
            text = f.read()
    elif text is None:
        text = click.get_text_stream("stdin").read()

    if choose is not None:
        prompt = ScriptedPrompt([choose])
    elif span is not None:
        prompt = ConsolePrompt(console=console)
    else:
        prompt = ScriptedPrompt()

    manager = build_manager(ctx, prompt=prompt)
    try:
        session = manager.open_session(text, content_type=mode, point=cursor)
        if span is not None:
            session.buffer.select(*span)
        result = manager.expand(session)
    except (CyclicHierarchyError, TemplateError) as e:
        raise click.ClickException(str(e))

    if isinstance(prompt, ScriptedPrompt):
        for notice in prompt.notices:
            console.print(f"[yellow]{notice}[/yellow]")

    if output_file:
        with open(output_file, "w") as f:
            f.write(session.buffer.text)
        console.print(f"[green]Saved to:[/green] {output_file}")
    else:
        click.echo(session.buffer.text, nl=False)

    if verbose:
        table = Table(title="Expansion Details")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Outcome", result.outcome.value)
        table.add_row("Tag", result.tag or "-")
        table.add_row("Template", result.qualified_name or "-")
        table.add_row("Chain", " -> ".join(manager.ancestor_chain(mode)))
        table.add_row("Point", str(session.buffer.point))

        console.print(table)
