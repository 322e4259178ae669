"""Template selection prompts."""

from .console import ConsolePrompt
from .scripted import ScriptedPrompt

__all__ = ["ConsolePrompt", "ScriptedPrompt"]
