"""Bulk template registration and JSON template packs."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from ..core.exceptions import ConfigurationError
from ..core.types import TemplateDefinition
from .registry import Owners, TemplateRegistry

logger = logging.getLogger(__name__)

TemplatePair = Union[Tuple[str, str], Tuple[str, str, Optional[str]]]


def define_templates(
    registry: TemplateRegistry,
    owners: Owners,
    pairs: Sequence[TemplatePair]
) -> List[TemplateDefinition]:
    """
    Register many templates that share one set of owners.

    Args:
        registry: Registry to register into
        owners: Content type(s) shared by every template
        pairs: ``(tag, body)`` or ``(tag, body, documentation)`` entries

    Returns:
        The definitions, in the order given
    """
    definitions = []
    for entry in pairs:
        tag, body = entry[0], entry[1]
        documentation = entry[2] if len(entry) > 2 else None
        definitions.append(registry.register(tag, owners, body, documentation))
    return definitions


class TemplateSpec(BaseModel):
    """One template in a pack."""
    tag: str = Field(..., min_length=1, description="Tag the template expands from")
    body: str = Field(..., description="Template body")
    documentation: Optional[str] = Field(None, description="Help text")


class TemplateGroup(BaseModel):
    """Templates sharing the same owning content types."""
    owners: List[str] = Field(..., min_length=1, description="Owning content types")
    templates: List[TemplateSpec] = Field(default_factory=list)

    @field_validator("owners")
    @classmethod
    def owners_not_blank(cls, value: List[str]) -> List[str]:
        if any(not owner.strip() for owner in value):
            raise ValueError("owner names must be non-empty")
        return value


class TemplatePack(BaseModel):
    """A JSON template pack: mode declarations plus template groups."""
    modes: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Mode name -> parent mode (null for a root)"
    )
    groups: List[TemplateGroup] = Field(default_factory=list)


def parse_template_pack(text: str, source: str = "<string>") -> TemplatePack:
    """Parse and validate template pack JSON."""
    try:
        return TemplatePack.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Template pack {source} is not valid JSON: {e.msg}",
            config_key="template_file",
            details={"line": e.lineno},
            cause=e,
        )
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Template pack {source} is invalid",
            config_key="template_file",
            details={"errors": [err["msg"] for err in e.errors()]},
            cause=e,
        )


def register_pack(registry: TemplateRegistry, pack: TemplatePack) -> List[TemplateDefinition]:
    """Register every group of a parsed pack."""
    definitions = []
    for group in pack.groups:
        definitions.extend(define_templates(
            registry,
            group.owners,
            [(t.tag, t.body, t.documentation) for t in group.templates],
        ))
    return definitions


def load_template_file(registry: TemplateRegistry, path: Union[str, Path]) -> TemplatePack:
    """
    Load a JSON template pack from disk and register its templates.

    Loading again overwrites earlier bindings. The pack is returned so the
    caller can declare its modes with the host.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read template pack {path}",
            config_key="template_file",
            cause=e,
        )

    pack = parse_template_pack(text, source=str(path))
    definitions = register_pack(registry, pack)
    logger.info("Loaded %d templates from %s", len(definitions), path)
    return pack
