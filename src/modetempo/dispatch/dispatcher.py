"""User-facing expansion command."""

import logging
from typing import Optional

from ..core.base import TemplateEngine, UIPrompt
from ..core.types import DispatchOutcome, DispatchResult
from ..editor.commands import Keymap
from ..editor.session import Session

logger = logging.getLogger(__name__)

NO_TEMPLATES_MESSAGE = "No templates defined for this session"


class ExpansionDispatcher:
    """
    Handles the expand command bound to a key.

    With an active region the user picks a template from the session's
    active set and it is wrapped around the region. Without one, the tag
    just before point is expanded in place. If there is no such tag the
    key falls through to whatever it did before the dispatcher was bound.
    """

    def __init__(
        self,
        engine: TemplateEngine,
        prompt: UIPrompt,
        keymap: Optional[Keymap] = None,
        key: str = "TAB",
        no_templates_message: str = NO_TEMPLATES_MESSAGE
    ):
        self.engine = engine
        self.prompt = prompt
        self.keymap = keymap
        self.key = key
        self.no_templates_message = no_templates_message

    def install(self, keymap: Keymap, key: Optional[str] = None) -> None:
        """Bind the dispatcher on top of the existing binding for `key`."""
        self.keymap = keymap
        self.key = key or self.key
        keymap.bind(self.key, self.dispatch)

    def dispatch(self, session: Session) -> DispatchResult:
        """Expand a template for `session`, or pass the key through."""
        if session.buffer.has_region:
            return self._expand_region(session)
        return self._expand_at_cursor(session)

    def _expand_region(self, session: Session) -> DispatchResult:
        active_set = session.active_set
        if not active_set:
            self.prompt.notify(self.no_templates_message)
            return DispatchResult(
                outcome=DispatchOutcome.NO_TEMPLATES,
                message=self.no_templates_message,
            )

        tag = self.prompt.choose_one(list(active_set))
        if tag is None or tag not in active_set:
            logger.debug("Template selection cancelled in session %s", session.id)
            return DispatchResult(outcome=DispatchOutcome.CANCELLED)

        name = active_set[tag]
        buffer = session.buffer
        replacement = self.engine.expand_over_region(name, buffer.region_text)
        buffer.replace_region(replacement)
        return DispatchResult(
            outcome=DispatchOutcome.EXPANDED_REGION,
            tag=tag,
            qualified_name=name,
        )

    def _expand_at_cursor(self, session: Session) -> DispatchResult:
        name = self.engine.try_complete_at_cursor(session, session.active_set)
        if name is not None:
            self.engine.expand_at_cursor(session, name)
            tag = next((t for t, n in session.active_set.items() if n == name), None)
            return DispatchResult(
                outcome=DispatchOutcome.EXPANDED_AT_CURSOR,
                tag=tag,
                qualified_name=name,
            )
        return self._pass_through(session)

    def _pass_through(self, session: Session) -> DispatchResult:
        result = DispatchResult(outcome=DispatchOutcome.PASSED_THROUGH)
        if self.keymap is None:
            return result

        # Re-issue the key once with this command hidden
        with self.keymap.suspended(self.dispatch):
            fallback = self.keymap.lookup(self.key)
            if fallback is not None:
                result.metadata["fallback"] = getattr(fallback, "__name__", repr(fallback))
            self.keymap.invoke(self.key, session)
        return result
