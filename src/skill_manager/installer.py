"""Replace-semantics installation of skills into a project directory."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from skill_manager.constants.install import INSTALL_RELATIVE_PARTS
from skill_manager.exceptions import InstallCopyError, InstallError
from skill_manager.io import remove_path
from skill_manager.model import InstallReport, SkillRecord

logger = logging.getLogger(__name__)


def install_target_dir(destination_root: Path) -> Path:
    """Return the skills directory inside *destination_root*."""
    return destination_root.joinpath(*INSTALL_RELATIVE_PARTS)


def install_skills(
    skills: Iterable[SkillRecord],
    destination_root: Path,
    *,
    on_installed: Callable[[SkillRecord, Path], None] | None = None,
) -> InstallReport:
    """Copy each skill into ``<destination_root>/.claude/skills/<name>``.

    An existing target for a skill is deleted before copying, so a rerun
    with unchanged sources yields identical contents. Skills install in the
    given order; the first failure raises :class:`InstallCopyError` and stops
    the run, leaving previously installed skills in place.
    """
    target_dir = install_target_dir(destination_root)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallError(f"Cannot create install directory {target_dir}: {exc}") from exc

    installed: list[str] = []
    for skill in skills:
        target_path = target_dir / skill.name
        try:
            remove_path(target_path)
            shutil.copytree(skill.source_path, target_path, symlinks=True)
        except OSError as exc:
            raise InstallCopyError(
                skill,
                target_path,
                installed=tuple(installed),
                reason=str(exc),
            ) from exc

        installed.append(skill.name)
        logger.debug("Installed %s -> %s", skill.source_path, target_path)
        if on_installed is not None:
            on_installed(skill, target_path)

    return InstallReport(target_dir=target_dir, installed=tuple(installed))
