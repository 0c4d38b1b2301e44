"""Persisted configuration for Skill Manager."""

from __future__ import annotations

from skill_manager.config.store import ConfigStore, default_config_path, default_repository_path

__all__ = ["ConfigStore", "default_config_path", "default_repository_path"]
