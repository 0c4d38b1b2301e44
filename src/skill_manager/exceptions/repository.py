"""Repository-related exceptions."""

from __future__ import annotations

from pathlib import Path

from skill_manager.exceptions.base import SkillManagerError


class InvalidRepositoryPathError(SkillManagerError, ValueError):
    """Raised when the configured repository root is missing or not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Repository path does not exist: {path}")
        self.path = path
