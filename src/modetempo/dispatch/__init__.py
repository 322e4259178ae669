"""Expansion dispatch."""

from .dispatcher import ExpansionDispatcher, NO_TEMPLATES_MESSAGE

__all__ = ["ExpansionDispatcher", "NO_TEMPLATES_MESSAGE"]
