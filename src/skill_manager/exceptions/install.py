"""Install-related exceptions."""

from __future__ import annotations

from pathlib import Path

from skill_manager.exceptions.base import SkillManagerError
from skill_manager.model import SkillRecord


class InstallError(SkillManagerError):
    """Raised when the install target cannot be prepared."""


class InstallCopyError(InstallError):
    """Raised when copying one skill fails; earlier skills remain installed.

    ``installed`` lists the names copied before the failure, in install order.
    """

    def __init__(
        self,
        skill: SkillRecord,
        target_path: Path,
        *,
        installed: tuple[str, ...],
        reason: str,
    ) -> None:
        super().__init__(f"Failed to install skill '{skill.name}' to {target_path}: {reason}")
        self.skill = skill
        self.target_path = target_path
        self.installed = installed
        self.reason = reason
