"""Reference template engine."""

from .jinja_engine import JinjaTemplateEngine, DictLoader, DEFAULT_TAG_PATTERN

__all__ = ["JinjaTemplateEngine", "DictLoader", "DEFAULT_TAG_PATTERN"]
