"""Custom exceptions for the mode-scoped template system."""

from typing import Optional, Dict, Any, List, Iterable


class ModeTempoError(Exception):
    """Base exception for all modetempo errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CyclicHierarchyError(ModeTempoError):
    """The host-supplied parent relation loops back on itself."""

    def __init__(
        self,
        message: str,
        content_type: Optional[str] = None,
        chain: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.content_type = content_type
        self.chain = list(chain or [])
        if content_type:
            self.details["content_type"] = content_type
        if chain:
            self.details["chain"] = self.chain


class RegistrationError(ModeTempoError):
    """Invalid input to template registration."""

    def __init__(
        self,
        message: str,
        tag: Optional[str] = None,
        owners: Optional[Iterable[str]] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.tag = tag
        self.owners = sorted(owners) if owners else []
        if tag:
            self.details["tag"] = tag
        if self.owners:
            self.details["owners"] = self.owners


class TemplateError(ModeTempoError):
    """Error in template processing."""

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.template_name = template_name
        if template_name:
            self.details["template_name"] = template_name


class ConfigurationError(ModeTempoError):
    """Error in configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key
