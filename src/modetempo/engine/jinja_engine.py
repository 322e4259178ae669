"""Jinja2-based reference template engine."""

import re
import logging
from typing import Dict, Any, List, Mapping, Optional, Callable, Tuple

from jinja2 import Environment, BaseLoader, TemplateNotFound
from jinja2 import TemplateError as JinjaTemplateError

from ..core.base import TemplateEngine
from ..core.exceptions import TemplateError, ConfigurationError
from ..editor.session import Session

logger = logging.getLogger(__name__)

DEFAULT_TAG_PATTERN = r"(\w+)\Z"


class DictLoader(BaseLoader):
    """Jinja2 loader over a live dictionary of template sources."""

    def __init__(self, templates: Dict[str, str]):
        self.templates = templates

    def get_source(self, environment: Environment, template: str):
        if template in self.templates:
            source = self.templates[template]
            # Stale once the entry is redefined
            return source, template, lambda: self.templates.get(template) is source
        raise TemplateNotFound(template)


class JinjaTemplateEngine(TemplateEngine):
    """
    Template engine whose bodies are Jinja2 template strings.

    The captured region is available to a body as ``region`` (empty when
    expanding at point). Expansion does no indentation and no placeholder
    navigation; point simply ends up after the inserted text.
    """

    name = "jinja"

    def __init__(
        self,
        tag_pattern: str = DEFAULT_TAG_PATTERN,
        region_variable: str = "region"
    ):
        """
        Initialize the engine.

        Args:
            tag_pattern: Regex applied to the text before point; group 1
                is the candidate tag and the whole match is consumed on
                expansion
            region_variable: Name the captured region is bound to

        Raises:
            ConfigurationError: If `tag_pattern` does not compile or has no
                capture group
        """
        try:
            self.tag_pattern = re.compile(tag_pattern)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid tag pattern {tag_pattern!r}: {e}",
                config_key="tag_pattern",
                cause=e,
            )
        if self.tag_pattern.groups < 1:
            raise ConfigurationError(
                f"Tag pattern {tag_pattern!r} needs a capture group for the tag",
                config_key="tag_pattern",
            )
        self.region_variable = region_variable
        self.sources: Dict[str, str] = {}
        self.labels: Dict[str, str] = {}
        # session id -> (qualified name, trigger start, point) of the last completion
        self._triggers: Dict[str, Tuple[str, int, int]] = {}

        self.env = Environment(
            loader=DictLoader(self.sources),
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        """Register custom Jinja2 filters."""

        def comment(text: str, marker: str = "//") -> str:
            """Prefix every line with a comment marker."""
            return "\n".join(f"{marker} {line}" if line else marker for line in text.split("\n"))

        def strip_empty_lines(text: str) -> str:
            """Remove empty lines from text."""
            return "\n".join(line for line in text.split("\n") if line.strip())

        self.env.filters["comment"] = comment
        self.env.filters["strip_empty_lines"] = strip_empty_lines

    def add_filter(self, name: str, func: Callable) -> None:
        """
        Add a custom filter function.

        Args:
            name: Filter name to use in templates
            func: Filter function
        """
        self.env.filters[name] = func

    def define_template(self, qualified_name: str, body: Any, label: str) -> None:
        if not isinstance(body, str):
            raise TemplateError(
                f"Template body must be a string, got {type(body).__name__}",
                template_name=qualified_name,
            )
        self.sources[qualified_name] = body
        self.labels[qualified_name] = label

    def render(self, qualified_name: str, region_text: str = "") -> str:
        """Render a defined template with `region_text` as the region."""
        try:
            template = self.env.get_template(qualified_name)
            return template.render(**{self.region_variable: region_text})
        except TemplateNotFound as e:
            raise TemplateError(
                f"Template '{qualified_name}' not found",
                template_name=qualified_name,
                cause=e,
            )
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Template '{qualified_name}' failed to render: {e}",
                template_name=qualified_name,
                cause=e,
            )

    def expand_over_region(self, qualified_name: str, region_text: str) -> str:
        return self.render(qualified_name, region_text)

    def expand_at_cursor(self, session: Session, qualified_name: str) -> None:
        if qualified_name not in self.sources:
            raise TemplateError(
                f"Template '{qualified_name}' not found",
                template_name=qualified_name,
            )
        expansion = self.render(qualified_name)

        buffer = session.buffer
        trigger = self._triggers.pop(session.id, None)
        if trigger is not None and trigger[0] == qualified_name and trigger[2] == buffer.point:
            buffer.delete(trigger[1], buffer.point)
        else:
            label = self.labels[qualified_name]
            if buffer.text_before_point.endswith(label):
                buffer.delete(buffer.point - len(label), buffer.point)
        buffer.insert(expansion)

    def try_complete_at_cursor(
        self,
        session: Session,
        active_set: Mapping[str, str]
    ) -> Optional[str]:
        """
        Find the active tag that ends at point.

        Candidates come from the tag pattern and from tags the pattern
        cannot see, such as ``#inc``. The one whose trigger starts
        earliest wins, so ``#inc`` beats ``inc`` in ``x #inc``.
        """
        before = session.buffer.text_before_point
        candidates: List[Tuple[int, str]] = []

        match = self.tag_pattern.search(before)
        if match and match.group(1) in active_set:
            candidates.append((match.start(), active_set[match.group(1)]))

        for tag in active_set:
            if self.tag_pattern.fullmatch(tag) or not before.endswith(tag):
                continue
            start = len(before) - len(tag)
            preceding = before[start - 1:start]
            if not preceding or not (preceding.isalnum() or preceding == "_"):
                candidates.append((start, active_set[tag]))

        if not candidates:
            self._triggers.pop(session.id, None)
            return None
        start, name = min(candidates, key=lambda candidate: candidate[0])
        self._triggers[session.id] = (name, start, session.buffer.point)
        return name

    def list_templates(self) -> List[Dict[str, Any]]:
        """List defined templates as name/label/source dictionaries."""
        return [
            {"name": name, "label": self.labels[name], "source": source}
            for name, source in self.sources.items()
        ]
