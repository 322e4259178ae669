"""Session activation."""

from .manager import ActivationManager

__all__ = ["ActivationManager"]
