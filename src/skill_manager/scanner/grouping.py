"""Category grouping and selection-choice construction for discovered skills."""

from __future__ import annotations

from skill_manager.constants.discovery import UNCATEGORIZED_LABEL
from skill_manager.constants.reporting import DISPLAY_NAME_WIDTH
from skill_manager.model import CategoryGroup, SkillChoice, SkillRecord


def category_label(category: str) -> str:
    """Return the display label for a category path."""
    return category or UNCATEGORIZED_LABEL


def group_skills(skills: list[SkillRecord]) -> list[CategoryGroup]:
    """Group skills by category label, sorted ascending by label.

    Skills keep their scanner order within each group. ``Uncategorized``
    sorts by its literal text alongside the other labels.
    """
    buckets: dict[str, list[SkillRecord]] = {}
    for skill in skills:
        buckets.setdefault(category_label(skill.category), []).append(skill)
    return [CategoryGroup(label=label, skills=tuple(buckets[label])) for label in sorted(buckets)]


def build_choices(groups: list[CategoryGroup]) -> list[tuple[str, list[SkillChoice]]]:
    """Turn category groups into ``(header, choices)`` pairs for a selection prompt."""
    return [(group.label, [_skill_choice(skill) for skill in group.skills]) for group in groups]


def _skill_choice(skill: SkillRecord) -> SkillChoice:
    label = f"{skill.display_name.ljust(DISPLAY_NAME_WIDTH)} {skill.description}"
    return SkillChoice(label=label, value=skill)
