"""Constants for repository discovery and skill metadata."""

from __future__ import annotations

DESCRIPTOR_FILENAME: str = "skill.md"
DESCRIPTOR_ENCODING: str = "utf-8"

DEFAULT_DESCRIPTION: str = "No description"
DESCRIPTION_MAX_LENGTH: int = 50
TRUNCATION_MARKER: str = "..."

CATEGORY_SEPARATOR: str = "/"
UNCATEGORIZED_LABEL: str = "Uncategorized"
