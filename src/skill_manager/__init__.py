"""Skill Manager: install categorized agent skills from a local repository."""

__version__ = "1.0.0"
