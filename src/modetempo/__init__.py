"""
modetempo - Mode-scoped text templates

Short tags expand into text skeletons, and which tags are available
depends on the content type (mode) being edited. Modes form a forest;
a mode sees its own templates plus those of its ancestors, with the
more specific mode winning on tag collisions.

Basic Usage:
    >>> from modetempo import TempoManager
    >>> tm = TempoManager()
    >>>
    >>> # Register a template shared by two modes
    >>> tm.register("for", {"c", "java"}, "for (;;) {\\n{{ region }}\\n}")
    >>>
    >>> # Open a session in C mode and expand the tag before point
    >>> session = tm.open_session("for", content_type="c")
    >>> result = tm.expand(session)
    >>> print(session.buffer.text)

For more control, use the individual modules:
    - modetempo.hierarchy: Mode parent relation and ancestor chains
    - modetempo.templates: Template registry, bulk loading, built-ins
    - modetempo.activation: Per-session active template sets
    - modetempo.dispatch: The expand command
    - modetempo.engine: Jinja2 reference template engine
    - modetempo.prompt: Selection prompts
    - modetempo.cli: Command-line interface

Not thread-safe: all calls are expected on one thread.
"""

import logging
from pathlib import Path
from typing import Optional, Dict, Any, List, Sequence, Union

from .core.types import (
    TemplateDefinition,
    DispatchOutcome,
    DispatchResult,
)
from .core.base import TemplateEngine, UIPrompt
from .core.config import Settings, get_settings
from .core.exceptions import (
    ModeTempoError,
    CyclicHierarchyError,
    RegistrationError,
    TemplateError,
    ConfigurationError,
)
from .hierarchy import HierarchyResolver, ModeTable
from .templates import (
    TemplateRegistry,
    qualified_name,
    define_templates,
    load_template_file,
    install_builtin_templates,
)
from .templates.loader import TemplatePair
from .templates.registry import Owners
from .activation import ActivationManager
from .dispatch import ExpansionDispatcher
from .editor import Buffer, Session, Keymap, insert_text_command
from .engine import JinjaTemplateEngine
from .prompt import ConsolePrompt, ScriptedPrompt

logger = logging.getLogger(__name__)

__version__ = "1.0.0"
__all__ = [
    # Main class
    "TempoManager",
    # Core types
    "TemplateDefinition",
    "DispatchOutcome",
    "DispatchResult",
    "TemplateEngine",
    "UIPrompt",
    # Exceptions
    "ModeTempoError",
    "CyclicHierarchyError",
    "RegistrationError",
    "TemplateError",
    "ConfigurationError",
    # Individual components (for advanced use)
    "HierarchyResolver",
    "ModeTable",
    "TemplateRegistry",
    "qualified_name",
    "define_templates",
    "ActivationManager",
    "ExpansionDispatcher",
    "JinjaTemplateEngine",
    "ConsolePrompt",
    "ScriptedPrompt",
    "Buffer",
    "Session",
    "Keymap",
]


class TempoManager:
    """
    Main interface wiring modes, registry, activation, and dispatch.

    Example:
        >>> tm = TempoManager(load_builtin=True)
        >>> session = tm.open_session("if", content_type="c")
        >>> tm.expand(session).outcome
        <DispatchOutcome.EXPANDED_AT_CURSOR: 'expanded_at_cursor'>
    """

    def __init__(
        self,
        engine: Optional[TemplateEngine] = None,
        prompt: Optional[UIPrompt] = None,
        modes: Optional[ModeTable] = None,
        settings: Optional[Settings] = None,
        load_builtin: Optional[bool] = None,
        template_file: Optional[Union[str, Path]] = None,
        fallback_text: str = "\t",
    ):
        """
        Initialize the TempoManager.

        Args:
            engine: Template engine (defaults to the Jinja2 engine)
            prompt: Selection prompt (defaults to a terminal prompt)
            modes: Mode table (defaults to an empty one)
            settings: Settings (defaults to the cached global settings)
            load_builtin: Register the built-in modes and templates
                (defaults to the `load_builtin` setting)
            template_file: JSON template pack to load
                (defaults to the `template_file` setting)
            fallback_text: What the expand key inserts when no tag matches
        """
        self.settings = settings or get_settings()

        self.engine = engine or JinjaTemplateEngine(
            tag_pattern=self.settings.engine.tag_pattern,
            region_variable=self.settings.engine.region_variable,
        )
        self.prompt = prompt or ConsolePrompt()
        self.modes = modes if modes is not None else ModeTable()

        self.registry = TemplateRegistry(self.engine, prefix=self.settings.registry.name_prefix)
        self.resolver = HierarchyResolver(self.modes)
        self.activation = ActivationManager(self.resolver, self.registry, self.engine)

        self.keymap = Keymap()
        self.dispatcher = ExpansionDispatcher(
            self.engine,
            self.prompt,
            key=self.settings.dispatch.key,
            no_templates_message=self.settings.dispatch.no_templates_message,
        )
        self.keymap.bind(self.dispatcher.key, insert_text_command(fallback_text))
        self.dispatcher.install(self.keymap)

        self._sessions: Dict[str, Session] = {}

        if load_builtin is None:
            load_builtin = self.settings.templates.load_builtin
        if load_builtin:
            install_builtin_templates(self.registry, self.modes)

        template_file = template_file or self.settings.templates.template_file
        if template_file:
            self.load_templates(template_file)

    # Modes
    def define_mode(self, name: str, parent: Optional[str] = None) -> None:
        """Declare a mode and its parent."""
        self.modes.define(name, parent)

    def ancestor_chain(self, content_type: str) -> List[str]:
        """Root-first chain ending with `content_type`."""
        return self.resolver.ancestor_chain(content_type)

    # Registration
    def register(
        self,
        tag: str,
        owners: Owners,
        body: Any,
        documentation: Optional[str] = None
    ) -> TemplateDefinition:
        """Register one template for one or more modes."""
        return self.registry.register(tag, owners, body, documentation)

    def define_templates(self, owners: Owners, pairs: Sequence[TemplatePair]) -> List[TemplateDefinition]:
        """Register several templates sharing the same modes."""
        return define_templates(self.registry, owners, pairs)

    def load_templates(self, path: Union[str, Path]) -> List[str]:
        """
        Load a JSON template pack, declaring its modes first.

        Returns:
            Names of the modes the pack declared
        """
        pack = load_template_file(self.registry, path)
        for name, parent in pack.modes.items():
            self.modes.define(name, parent)
        return list(pack.modes)

    # Sessions
    def open_session(
        self,
        text: str = "",
        content_type: Optional[str] = None,
        point: Optional[int] = None
    ) -> Session:
        """Create a session, activating it when a content type is given."""
        session = Session.from_text(text, point)
        self._sessions[session.id] = session
        if content_type is not None:
            self.activate(session, content_type)
        return session

    def close_session(self, session: Session) -> None:
        self._sessions.pop(session.id, None)

    @property
    def sessions(self) -> List[Session]:
        return list(self._sessions.values())

    def activate(self, session: Session, content_type: str) -> Dict[str, str]:
        """Switch `session` to `content_type` and rebuild its active set."""
        return self.activation.activate(session, content_type)

    def reactivate_all(self) -> None:
        """Re-run activation for every open session that has a content type."""
        for session in self.sessions:
            if session.content_type is not None:
                self.activate(session, session.content_type)

    def expand(self, session: Session) -> DispatchResult:
        """Press the expand key in `session`."""
        result = self.keymap.invoke(self.dispatcher.key, session)
        if isinstance(result, DispatchResult):
            return result
        return DispatchResult(outcome=DispatchOutcome.PASSED_THROUGH)

    # Introspection
    def list_templates(self, content_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List templates, either all of them or those active for a mode.

        For a mode, each entry is the definition that wins for its tag.
        """
        if content_type is None:
            return self.registry.list_templates()
        bindings = self.activation.effective_bindings(content_type)
        return [self.registry.get(name).to_dict() for name in bindings.values()]

    def list_modes(self) -> List[Dict[str, Any]]:
        """List known modes with their ancestor chains."""
        modes = []
        for name in self.modes.names():
            try:
                chain = self.resolver.ancestor_chain(name)
            except CyclicHierarchyError as e:
                logger.warning("Mode %s has a cyclic parent relation", name)
                chain = e.chain
            modes.append({
                "name": name,
                "parent": self.modes.parent_of(name),
                "chain": chain,
                "templates": len(self.registry.bindings_for(name)),
            })
        return modes
