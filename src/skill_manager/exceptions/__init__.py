"""Shared exception hierarchy for Skill Manager."""

from __future__ import annotations

from .base import SkillManagerError
from .config import ConfigError
from .install import InstallCopyError, InstallError
from .repository import InvalidRepositoryPathError

__all__ = [
    "ConfigError",
    "InstallCopyError",
    "InstallError",
    "InvalidRepositoryPathError",
    "SkillManagerError",
]
