"""Recursive discovery of skills and categories in a repository tree."""

from __future__ import annotations

import logging
from pathlib import Path

from skill_manager.constants.discovery import CATEGORY_SEPARATOR, DESCRIPTOR_FILENAME
from skill_manager.exceptions import InvalidRepositoryPathError
from skill_manager.model import SkillRecord
from skill_manager.parsers import read_descriptor

logger = logging.getLogger(__name__)


def resolve_repository_root(path: Path | str) -> Path:
    """Expand and resolve a repository root, failing if it is not a directory."""
    root = Path(path).expanduser()
    if not root.is_dir():
        raise InvalidRepositoryPathError(root)
    return root.resolve()


def scan_repository(root: Path | str) -> list[SkillRecord]:
    """Scan a repository root and return every skill found beneath it.

    A directory holding a descriptor file is a skill; any other directory is
    a category whose name is appended to the category path of skills nested
    under it. Records come back in traversal order. Subtrees that cannot be
    listed are logged and skipped.
    """
    resolved = resolve_repository_root(root)

    root_descriptor = find_descriptor(resolved)
    if root_descriptor is not None:
        logger.debug("Repository root %s is itself a skill", resolved)
        return [_build_record(resolved, root_descriptor, category="")]

    skills = _scan_directory(resolved, category="")
    logger.debug("Discovered %d skill(s) under %s", len(skills), resolved)
    return skills


def find_descriptor(directory: Path) -> Path | None:
    """Return the descriptor file directly inside *directory*, if any."""
    candidate = directory / DESCRIPTOR_FILENAME
    try:
        if candidate.is_file():
            return candidate
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", candidate, exc)
    return None


def _scan_directory(directory: Path, category: str) -> list[SkillRecord]:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        logger.warning("Error scanning directory %s: %s", directory, exc)
        return []

    skills: list[SkillRecord] = []
    for entry in entries:
        if not _is_directory(entry):
            continue
        descriptor = find_descriptor(entry)
        if descriptor is not None:
            skills.append(_build_record(entry, descriptor, category=category))
        else:
            skills.extend(_scan_directory(entry, _child_category(category, entry.name)))
    return skills


def _build_record(skill_dir: Path, descriptor: Path, *, category: str) -> SkillRecord:
    metadata = read_descriptor(descriptor)
    record = SkillRecord(
        name=skill_dir.name,
        display_name=metadata.display_name or skill_dir.name,
        description=metadata.description,
        category=category,
        source_path=skill_dir,
    )
    logger.debug("Found skill %s (category=%r)", record.name, record.category)
    return record


def _child_category(parent: str, name: str) -> str:
    return f"{parent}{CATEGORY_SEPARATOR}{name}" if parent else name


def _is_directory(path: Path) -> bool:
    """Return True for real directories; symlinks are never traversed."""
    try:
        return not path.is_symlink() and path.is_dir()
    except OSError:
        return False
