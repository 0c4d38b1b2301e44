"""Core data models for Skill Manager."""

from .entities import CategoryGroup, DescriptorMetadata, InstallReport, SkillChoice, SkillRecord

__all__ = [
    "CategoryGroup",
    "DescriptorMetadata",
    "InstallReport",
    "SkillChoice",
    "SkillRecord",
]
