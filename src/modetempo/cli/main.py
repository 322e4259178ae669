"""Main CLI entry point."""

import click
from rich.console import Console

from ..core.config import get_settings
from ..core.logging_utils import configure_logging
from .commands import (
    expand,
    list_templates,
    list_modes,
    chain,
)

console = Console()


@click.group()
@click.version_option(version="1.0.0", prog_name="modetempo")
@click.option("--templates", type=click.Path(exists=True), default=None, help="JSON template pack to load")
@click.option("--builtin/--no-builtin", default=True, help="Load the built-in templates")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level"
)
@click.pass_context
def cli(ctx, templates, builtin, log_level):
    """modetempo - mode-scoped text templates.

    Tags typed before the cursor expand into text skeletons; the tags
    available depend on the mode of the buffer.

    \b
    Examples:
        modetempo modes
        modetempo list-templates --mode c
        modetempo expand -m c "for"
        modetempo expand -m c -f main.c --region 10:42 --choose if

    Use --help on any command for more details.
    """
    settings = get_settings().logging
    if log_level:
        settings = settings.model_copy(update={"level": log_level})
    configure_logging(settings)

    ctx.ensure_object(dict)
    ctx.obj["templates"] = templates
    ctx.obj["builtin"] = builtin


cli.add_command(expand)
cli.add_command(list_templates)
cli.add_command(list_modes)
cli.add_command(chain)


@cli.command()
def info():
    """Show information about modetempo."""
    from rich.panel import Panel

    info_text = """[bold]modetempo[/bold] - Mode-scoped text templates

[bold]Concepts:[/bold]
  • [cyan]Modes[/cyan]: content types forming a parent/child forest
  • [cyan]Templates[/cyan]: tags registered for one or more modes
  • [cyan]Activation[/cyan]: a mode sees its ancestors' templates, nearest wins
  • [cyan]Expansion[/cyan]: tag before the cursor, or wrap a selected region

[bold]Usage:[/bold]
  • Python SDK: from modetempo import TempoManager
  • CLI: modetempo <command>

[bold]Help:[/bold]
  CLI Help: modetempo --help
  Command Help: modetempo <command> --help"""

    console.print(Panel(info_text, title="modetempo v1.0.0", border_style="green"))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
