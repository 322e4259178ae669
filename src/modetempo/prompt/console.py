"""Rich-based interactive selection prompt."""

from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

from ..core.base import UIPrompt


class ConsolePrompt(UIPrompt):
    """
    Asks on the terminal which template to use.

    An empty answer, end of input or Ctrl-C cancels the selection.
    """

    def __init__(self, console: Optional[Console] = None, title: str = "Template"):
        self.console = console or Console()
        self.title = title

    def choose_one(self, labels: Sequence[str]) -> Optional[str]:
        choices = list(labels)
        try:
            answer = Prompt.ask(
                f"[bold]{self.title}[/bold]",
                console=self.console,
                choices=choices + [""],
                show_choices=True,
                default="",
                show_default=False,
            )
        except (EOFError, KeyboardInterrupt):
            return None
        return answer or None

    def notify(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")
