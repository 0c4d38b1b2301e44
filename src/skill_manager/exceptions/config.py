"""Configuration-related exceptions."""

from __future__ import annotations

from skill_manager.exceptions.base import SkillManagerError


class ConfigError(SkillManagerError, ValueError):
    """Raised when the stored configuration is invalid."""
