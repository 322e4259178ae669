"""Per-content-type template registry."""

import logging
from typing import Dict, List, Optional, Any, Iterable, Union

from ..core.base import TemplateEngine
from ..core.exceptions import RegistrationError
from ..core.types import Bindings, TemplateDefinition

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "tempo:"
OWNER_SEPARATOR = ","
TAG_SEPARATOR = ":"

Owners = Union[str, Iterable[str]]


def normalize_owners(owners: Owners) -> frozenset:
    """Accept a single content type or any iterable of them."""
    if isinstance(owners, str):
        return frozenset([owners])
    return frozenset(owners)


def qualified_name(owners: Owners, tag: str, prefix: str = DEFAULT_PREFIX) -> str:
    """
    Derive the globally unique name of a template.

    The sorted owner names are joined with ``,`` and the tag follows a
    ``:``. Owner names may contain neither separator, so the first ``:``
    after the prefix always ends the owner list and the mapping is
    injective.

    Example:
        >>> qualified_name({"c++", "c"}, "for")
        'tempo:c,c++:for'
    """
    owner_set = normalize_owners(owners)
    _validate(tag, owner_set)
    return f"{prefix}{OWNER_SEPARATOR.join(sorted(owner_set))}{TAG_SEPARATOR}{tag}"


def _validate(tag: str, owners: frozenset) -> None:
    if not tag:
        raise RegistrationError("Template tag must be non-empty", owners=owners)
    if not owners:
        raise RegistrationError("Template needs at least one owning content type", tag=tag)
    for owner in owners:
        if not isinstance(owner, str) or not owner:
            raise RegistrationError(
                f"Invalid content type {owner!r}", tag=tag, owners=[str(o) for o in owners]
            )
        if OWNER_SEPARATOR in owner or TAG_SEPARATOR in owner:
            raise RegistrationError(
                f"Content type '{owner}' may not contain "
                f"'{OWNER_SEPARATOR}' or '{TAG_SEPARATOR}'",
                tag=tag,
                owners=owners,
            )


class TemplateRegistry:
    """
    Registry of templates keyed by content type.

    Each content type gets an ordered tag -> qualified name mapping the
    first time a template is registered for it. Bodies are not kept here;
    they are forwarded to the template engine, which owns them.
    """

    def __init__(self, engine: TemplateEngine, prefix: str = DEFAULT_PREFIX):
        self.engine = engine
        self.prefix = prefix
        self._types: Dict[str, Bindings] = {}
        self._definitions: Dict[str, TemplateDefinition] = {}

    def register(
        self,
        tag: str,
        owners: Owners,
        body: Any,
        documentation: Optional[str] = None
    ) -> TemplateDefinition:
        """
        Register a template under every content type in `owners`.

        Re-registering a tag for a content type replaces its binding; this
        is how configuration reloads update templates and is not an error.
        Sessions already activated see the change on their next activation.

        Args:
            tag: Short label the user types or picks
            owners: Content type(s) the template belongs to
            body: Template body, passed through to the engine
            documentation: Optional help text for listings

        Returns:
            The new TemplateDefinition
        """
        owner_set = normalize_owners(owners)
        name = qualified_name(owner_set, tag, self.prefix)

        # Engine first so a rejected body changes nothing here
        self.engine.define_template(name, body, tag)

        previous = self._definitions.get(name)
        if previous is not None and previous.body != body:
            logger.info("Replacing body of template %s", name)

        for owner in sorted(owner_set):
            bindings = self._types.setdefault(owner, {})
            old = bindings.get(tag)
            if old is not None and old != name:
                logger.info(
                    "Tag '%s' for content type '%s' rebound from %s to %s",
                    tag, owner, old, name
                )
            bindings[tag] = name

        definition = TemplateDefinition(
            tag=tag,
            owners=owner_set,
            qualified_name=name,
            body=body,
            documentation=documentation,
        )
        self._definitions[name] = definition

        logger.debug("Registered %s for %s", name, sorted(owner_set))
        return definition

    def bindings_for(self, content_type: str) -> Bindings:
        """Copy of the tag bindings registered directly for a content type."""
        return dict(self._types.get(content_type, {}))

    def has_bindings(self, content_type: str) -> bool:
        return content_type in self._types

    def get(self, name: str) -> Optional[TemplateDefinition]:
        """Get a definition by qualified name."""
        return self._definitions.get(name)

    def definitions(self) -> List[TemplateDefinition]:
        """All definitions, in first-registration order."""
        return list(self._definitions.values())

    def content_types(self) -> List[str]:
        """Content types that have at least one registration."""
        return list(self._types)

    def list_templates(self, content_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """List definitions as dictionaries, optionally for one content type."""
        if content_type is None:
            names = list(self._definitions)
        else:
            names = list(self._types.get(content_type, {}).values())
        return [self._definitions[name].to_dict() for name in names]

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
