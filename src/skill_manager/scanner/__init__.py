"""Repository scanning and category grouping."""

from .discovery import find_descriptor, resolve_repository_root, scan_repository
from .grouping import build_choices, category_label, group_skills

__all__ = [
    "build_choices",
    "category_label",
    "find_descriptor",
    "group_skills",
    "resolve_repository_root",
    "scan_repository",
]
