"""Host-side table of editing modes and their parent links."""

from typing import Dict, List, Optional


class ModeTable:
    """
    A simple mutable parent relation, standing in for the host editor.

    Usable directly as the `parents` argument of `HierarchyResolver`.
    """

    def __init__(self, parents: Optional[Dict[str, Optional[str]]] = None):
        self._parents: Dict[str, Optional[str]] = {}
        for name, parent in (parents or {}).items():
            self.define(name, parent)

    def define(self, name: str, parent: Optional[str] = None) -> None:
        """Declare a mode, replacing any previous parent link."""
        if not name:
            raise ValueError("Mode name must be non-empty")
        self._parents[name] = parent or None
        if parent and parent not in self._parents:
            self._parents[parent] = None

    def parent_of(self, name: str) -> Optional[str]:
        return self._parents.get(name)

    def __call__(self, name: str) -> Optional[str]:
        return self.parent_of(name)

    def __contains__(self, name: object) -> bool:
        return name in self._parents

    def names(self) -> List[str]:
        """All known modes, in definition order."""
        return list(self._parents)

    def children(self, name: str) -> List[str]:
        """Modes whose parent is `name`."""
        return [mode for mode, parent in self._parents.items() if parent == name]

    def roots(self) -> List[str]:
        return [mode for mode, parent in self._parents.items() if parent is None]
