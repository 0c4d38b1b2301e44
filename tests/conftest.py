"""Shared pytest fixtures for building skill repositories on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

SkillFactory: TypeAlias = Callable[..., Path]


@pytest.fixture
def make_skill() -> SkillFactory:
    """Return a factory that creates a skill directory with a descriptor."""

    def _make(
        parent: Path,
        name: str,
        *,
        descriptor: str | None = None,
        filename: str = "skill.md",
        assets: dict[str, str] | None = None,
    ) -> Path:
        skill_dir = parent / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        text = descriptor if descriptor is not None else f"name: {name.title()}\ndescription: About {name}\n"
        (skill_dir / filename).write_text(text, encoding="utf-8")
        for relative, content in (assets or {}).items():
            asset = skill_dir / relative
            asset.parent.mkdir(parents=True, exist_ok=True)
            asset.write_text(content, encoding="utf-8")
        return skill_dir

    return _make


@pytest.fixture
def sample_repo(tmp_path: Path, make_skill: SkillFactory) -> Path:
    """Build a repository with root-level, nested, and empty directories.

    Layout::

        repo/
          root-skill/skill.md
          Zeta/zeta-skill/skill.md
          Alpha/alpha-skill/skill.md
          A/B/skillX/skill.md (+ scripts/run.sh)
          empty/
    """
    root = tmp_path / "repo"
    root.mkdir()
    make_skill(root, "root-skill")
    make_skill(root / "Zeta", "zeta-skill")
    make_skill(root / "Alpha", "alpha-skill")
    make_skill(root / "A" / "B", "skillX", assets={"scripts/run.sh": "echo run\n"})
    (root / "empty").mkdir()
    return root
