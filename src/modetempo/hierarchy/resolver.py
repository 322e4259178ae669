"""Ancestor chain resolution over the host's content-type forest."""

from typing import Callable, List, Mapping, Optional, Union

from ..core.exceptions import CyclicHierarchyError

ParentLookup = Union[Mapping[str, Optional[str]], Callable[[str], Optional[str]]]


class HierarchyResolver:
    """
    Computes ancestor chains from a parent relation supplied by the host.

    The relation is either a mapping (missing keys mean "no parent") or a
    callable returning the parent name or None. It is read on every call
    and never cached, so later changes by the host are picked up.
    """

    def __init__(self, parents: ParentLookup):
        if callable(parents) and not isinstance(parents, Mapping):
            self._parent_of = parents
        else:
            self._parent_of = lambda name: parents.get(name)

    def parent_of(self, content_type: str) -> Optional[str]:
        return self._parent_of(content_type) or None

    def ancestor_chain(self, content_type: str) -> List[str]:
        """
        Return the chain from the root down to `content_type` itself.

        Raises:
            CyclicHierarchyError: If a type is reached twice while walking up
        """
        chain = [content_type]
        seen = {content_type}

        parent = self.parent_of(content_type)
        while parent is not None:
            if parent in seen:
                # Walk order, ending with the repeated type
                raise CyclicHierarchyError(
                    f"Cyclic parent relation reached from '{content_type}'",
                    content_type=content_type,
                    chain=chain + [parent],
                )
            seen.add(parent)
            chain.append(parent)
            parent = self.parent_of(parent)

        chain.reverse()
        return chain
