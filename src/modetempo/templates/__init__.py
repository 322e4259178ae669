"""Template registration: registry, loaders, and built-in templates."""

from .registry import TemplateRegistry, qualified_name, normalize_owners
from .loader import (
    define_templates,
    load_template_file,
    parse_template_pack,
    register_pack,
    TemplatePack,
    TemplateGroup,
    TemplateSpec,
)
from .builtin import install_builtin_templates, BUILTIN_MODES

__all__ = [
    "TemplateRegistry",
    "qualified_name",
    "normalize_owners",
    "define_templates",
    "load_template_file",
    "parse_template_pack",
    "register_pack",
    "TemplatePack",
    "TemplateGroup",
    "TemplateSpec",
    "install_builtin_templates",
    "BUILTIN_MODES",
]
