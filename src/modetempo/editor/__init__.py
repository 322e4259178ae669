"""Editing model: buffers, sessions, and key bindings."""

from .session import Buffer, Session
from .commands import Keymap, Command, insert_text_command

__all__ = [
    "Buffer",
    "Session",
    "Keymap",
    "Command",
    "insert_text_command",
]
