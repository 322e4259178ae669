"""CLI commands."""

from .expand import expand
from .templates import list_templates, list_modes, chain

__all__ = [
    "expand",
    "list_templates",
    "list_modes",
    "chain",
]
