"""Core type definitions for mode-scoped templates."""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, FrozenSet
from enum import Enum


# A content type (editing mode) is identified by its name.
ContentType = str

# tag -> qualified name, in registration order
Bindings = Dict[str, str]


@dataclass(frozen=True)
class TemplateDefinition:
    """
    A template registered under one or more content types.

    Created once per `register` call and never mutated afterwards. The
    body is opaque to the registry; only the template engine interprets it.
    """
    tag: str
    owners: FrozenSet[str]
    qualified_name: str
    body: Any
    documentation: Optional[str] = None

    @property
    def sorted_owners(self) -> list:
        return sorted(self.owners)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for display."""
        return {
            "tag": self.tag,
            "owners": self.sorted_owners,
            "qualified_name": self.qualified_name,
            "documentation": self.documentation or "",
        }


class DispatchOutcome(Enum):
    """What a single expansion request ended up doing."""
    EXPANDED_REGION = "expanded_region"
    EXPANDED_AT_CURSOR = "expanded_at_cursor"
    NO_TEMPLATES = "no_templates"
    CANCELLED = "cancelled"
    PASSED_THROUGH = "passed_through"


@dataclass
class DispatchResult:
    """Result of one `ExpansionDispatcher.dispatch` call."""
    outcome: DispatchOutcome
    tag: Optional[str] = None
    qualified_name: Optional[str] = None
    message: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def expanded(self) -> bool:
        """Whether a template was actually expanded."""
        return self.outcome in (
            DispatchOutcome.EXPANDED_REGION,
            DispatchOutcome.EXPANDED_AT_CURSOR,
        )
