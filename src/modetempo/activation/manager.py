"""Activation of a session's effective template set."""

import logging
from typing import Dict

from ..core.base import TemplateEngine
from ..core.exceptions import CyclicHierarchyError
from ..editor.session import Session
from ..hierarchy.resolver import HierarchyResolver
from ..templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)


class ActivationManager:
    """
    Builds and installs the active template set for a session.

    The active set is recomputed from the registry on every call and
    replaces the previous one outright. Templates registered later only
    become visible to a session when it is activated again.
    """

    def __init__(
        self,
        resolver: HierarchyResolver,
        registry: TemplateRegistry,
        engine: TemplateEngine
    ):
        self.resolver = resolver
        self.registry = registry
        self.engine = engine

    def effective_bindings(self, content_type: str) -> Dict[str, str]:
        """
        Merge the bindings of the ancestor chain, root first.

        A descendant's binding for a tag replaces its ancestors'.
        """
        merged: Dict[str, str] = {}
        for ancestor in self.resolver.ancestor_chain(content_type):
            merged.update(self.registry.bindings_for(ancestor))
        return merged

    def activate(self, session: Session, current_type: str) -> Dict[str, str]:
        """
        Install the effective template set of `current_type` into `session`.

        Raises:
            CyclicHierarchyError: If the parent relation is cyclic; the
                session keeps its previous active set
        """
        try:
            merged = self.effective_bindings(current_type)
        except CyclicHierarchyError as e:
            logger.error("Cannot activate %s for session %s: %s", current_type, session.id, e)
            raise

        self.engine.install_active_set(session, merged)
        session.content_type = current_type
        logger.debug(
            "Activated %s for session %s with %d templates",
            current_type, session.id, len(merged)
        )
        return dict(merged)
