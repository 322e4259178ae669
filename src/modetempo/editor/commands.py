"""Layered key bindings standing in for the host's command layer."""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional

from .session import Session

logger = logging.getLogger(__name__)

Command = Callable[[Session], Any]


class Keymap:
    """
    Key -> stack of commands; the most recently bound command wins.

    A command can be suspended, which hides it from lookups until the
    surrounding `suspended` block exits. Binding the same command twice
    for one key has no effect.
    """

    def __init__(self):
        self._bindings: Dict[str, List[Command]] = {}
        self._suspended: List[Command] = []

    def bind(self, key: str, command: Command) -> None:
        stack = self._bindings.setdefault(key, [])
        if command not in stack:
            stack.append(command)

    def unbind(self, key: str, command: Command) -> None:
        stack = self._bindings.get(key, [])
        if command in stack:
            stack.remove(command)

    def lookup(self, key: str) -> Optional[Command]:
        """Topmost command for `key` that is not suspended."""
        for command in reversed(self._bindings.get(key, [])):
            if command not in self._suspended:
                return command
        return None

    def invoke(self, key: str, session: Session) -> Any:
        """Run the command bound to `key`; a key with no command does nothing."""
        command = self.lookup(key)
        if command is None:
            logger.debug("Key %s is unbound", key)
            return None
        return command(session)

    @contextmanager
    def suspended(self, command: Command) -> Iterator[None]:
        """Hide `command` from lookups for the duration of the block."""
        self._suspended.append(command)
        try:
            yield
        finally:
            self._suspended.remove(command)


def insert_text_command(text: str) -> Command:
    """Command that inserts fixed text at point, e.g. plain indentation."""
    def command(session: Session) -> None:
        session.buffer.insert(text)
    command.__name__ = f"insert_{text!r}"
    return command
