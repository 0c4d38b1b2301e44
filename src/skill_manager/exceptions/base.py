"""Base exception for Skill Manager."""

from __future__ import annotations


class SkillManagerError(Exception):
    """Root of all errors raised by Skill Manager."""
