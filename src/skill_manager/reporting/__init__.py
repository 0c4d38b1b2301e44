"""Terminal output helpers."""

from .stdout import Styler

__all__ = ["Styler"]
