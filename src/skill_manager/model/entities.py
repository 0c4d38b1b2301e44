"""Frozen dataclasses shared across scanner, grouping, and installer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DescriptorMetadata:
    """Fields extracted from a skill descriptor file.

    ``display_name`` is ``None`` when the descriptor declares no name; the
    caller substitutes the skill directory name.
    """

    display_name: str | None
    description: str


@dataclass(frozen=True)
class SkillRecord:
    """One installable skill discovered in the repository."""

    name: str
    display_name: str
    description: str
    category: str
    source_path: Path


@dataclass(frozen=True)
class CategoryGroup:
    """Skills sharing one category label, in scanner order."""

    label: str
    skills: tuple[SkillRecord, ...]


@dataclass(frozen=True)
class SkillChoice:
    """A labeled selection entry wrapping a skill."""

    label: str
    value: SkillRecord


@dataclass(frozen=True)
class InstallReport:
    """Outcome of a completed install run."""

    target_dir: Path
    installed: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.installed)
