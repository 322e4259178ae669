"""Abstract collaborators driven by the registry and dispatcher.

The core never interprets template bodies or talks to the user directly.
It goes through these two narrow interfaces instead, so any engine or
prompt that implements them can be plugged in.
"""

from abc import ABC, abstractmethod
from typing import Optional, Any, Mapping, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..editor.session import Session


class TemplateEngine(ABC):
    """
    Abstract base class for template engines.

    Owns template bodies and performs the actual text expansion.
    """

    name: str = "base_engine"

    @abstractmethod
    def define_template(self, qualified_name: str, body: Any, label: str) -> None:
        """
        Store (or replace) the body for a qualified name.

        Args:
            qualified_name: Globally unique template name
            body: Opaque template body
            label: The tag the template is offered under
        """
        pass

    @abstractmethod
    def expand_over_region(self, qualified_name: str, region_text: str) -> str:
        """
        Expand a template around captured text.

        Args:
            qualified_name: Template to expand
            region_text: Text of the selected region

        Returns:
            Replacement text for the region
        """
        pass

    @abstractmethod
    def expand_at_cursor(self, session: "Session", qualified_name: str) -> None:
        """Expand a template in place of the tag that precedes point."""
        pass

    @abstractmethod
    def try_complete_at_cursor(
        self,
        session: "Session",
        active_set: Mapping[str, str]
    ) -> Optional[str]:
        """
        Look for a complete active tag immediately before point.

        Returns:
            The qualified name bound to that tag, or None
        """
        pass

    def install_active_set(self, session: "Session", active_set: Mapping[str, str]) -> None:
        """Make `active_set` the session's complete set of available tags."""
        session.active_set = dict(active_set)


class UIPrompt(ABC):
    """Abstract base class for user selection prompts."""

    @abstractmethod
    def choose_one(self, labels: Sequence[str]) -> Optional[str]:
        """
        Ask the user to pick one label.

        Returns:
            The chosen label, or None if the user cancelled
        """
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a one-line informational message."""
        pass
