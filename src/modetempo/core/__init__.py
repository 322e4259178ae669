"""Core module - foundational types, collaborator interfaces, and configuration."""

from .types import (
    ContentType,
    Bindings,
    TemplateDefinition,
    DispatchOutcome,
    DispatchResult,
)
from .base import TemplateEngine, UIPrompt
from .config import Settings, get_settings, reload_settings
from .logging_utils import configure_logging
from .exceptions import (
    ModeTempoError,
    CyclicHierarchyError,
    RegistrationError,
    TemplateError,
    ConfigurationError,
)

__all__ = [
    # Types
    "ContentType",
    "Bindings",
    "TemplateDefinition",
    "DispatchOutcome",
    "DispatchResult",
    # Collaborators
    "TemplateEngine",
    "UIPrompt",
    # Configuration
    "Settings",
    "get_settings",
    "reload_settings",
    "configure_logging",
    # Exceptions
    "ModeTempoError",
    "CyclicHierarchyError",
    "RegistrationError",
    "TemplateError",
    "ConfigurationError",
]
