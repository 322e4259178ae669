"""Content-type hierarchy: parent relation and ancestor chains."""

from .resolver import HierarchyResolver, ParentLookup
from .modes import ModeTable

__all__ = [
    "HierarchyResolver",
    "ParentLookup",
    "ModeTable",
]
