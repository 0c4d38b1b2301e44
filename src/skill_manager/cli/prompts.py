"""Interactive prompts for first-time setup and skill selection."""

from __future__ import annotations

from pathlib import Path

import questionary

from skill_manager.constants.reporting import (
    CATEGORY_HEADER_MARKER,
    EMPTY_SELECTION_MESSAGE,
    REPOSITORY_MISSING_MESSAGE,
    REPOSITORY_PROMPT_MESSAGE,
    SELECT_SKILLS_MESSAGE,
)
from skill_manager.model import SkillChoice, SkillRecord


def prompt_repository_path(default: Path) -> Path | None:
    """Ask for the repository path. Returns ``None`` if the user cancels."""
    answer = questionary.path(
        REPOSITORY_PROMPT_MESSAGE,
        default=str(default),
        only_directories=True,
        validate=validate_repository_input,
    ).ask()
    if answer is None:
        return None
    return Path(answer).expanduser()


def validate_repository_input(value: str) -> bool | str:
    """Accept existing directories; otherwise return the error message to show."""
    if value.strip() and Path(value.strip()).expanduser().is_dir():
        return True
    return REPOSITORY_MISSING_MESSAGE


def validate_selection(selected: list[SkillRecord]) -> bool | str:
    """Reject an empty selection so the checkbox prompt asks again."""
    return True if selected else EMPTY_SELECTION_MESSAGE


def build_prompt_choices(
    groups: list[tuple[str, list[SkillChoice]]],
) -> list[questionary.Separator | questionary.Choice]:
    """Flatten grouped choices into questionary entries with category separators."""
    entries: list[questionary.Separator | questionary.Choice] = []
    for label, choices in groups:
        entries.append(questionary.Separator(f"{CATEGORY_HEADER_MARKER} {label}"))
        entries.extend(questionary.Choice(title=f"  {choice.label}", value=choice.value) for choice in choices)
    return entries


def select_skills(groups: list[tuple[str, list[SkillChoice]]]) -> list[SkillRecord] | None:
    """Show a checkbox of skills grouped by category.

    Returns the chosen skills, or ``None`` when the prompt is cancelled.
    """
    return questionary.checkbox(
        SELECT_SKILLS_MESSAGE,
        choices=build_prompt_choices(groups),
        validate=validate_selection,
    ).ask()
